# services/readiness_engine/definitions.py
# Static definitions for the Smart City Infrastructure readiness assessment.

CATALOG_VERSION = "1.0.0"
CATALOG_TITLE = "Smart City Infrastructure Assessment"

AGREEMENT_SCALE = {"low": "Strongly Disagree", "high": "Strongly Agree"}

# --- Part 1: Disposition (psychometric fit) ---
DISPOSITION_QUESTIONS = [
    {
        "id": "psych_1",
        "type": "scaled",
        "category": "disposition",
        "section": "Interest Scale",
        "prompt": "I enjoy thinking about how cities and infrastructure work.",
        "scale_bounds": AGREEMENT_SCALE,
    },
    {
        "id": "psych_2",
        "type": "scaled",
        "category": "disposition",
        "section": "Interest Scale",
        "prompt": "I'm interested in how data can improve public services.",
        "scale_bounds": AGREEMENT_SCALE,
    },
    {
        "id": "psych_3",
        "type": "scaled",
        "category": "disposition",
        "section": "Interest Scale",
        "prompt": "Sustainable design and future cities fascinate me.",
        "scale_bounds": AGREEMENT_SCALE,
    },
    {
        "id": "psych_4",
        "type": "scaled",
        "category": "disposition",
        "section": "Personality Fit",
        "prompt": "I prefer working on long-term projects that require sustained effort.",
        "scale_bounds": AGREEMENT_SCALE,
    },
    {
        "id": "psych_5",
        "type": "scaled",
        "category": "disposition",
        "section": "Personality Fit",
        "prompt": "I enjoy collaborating with diverse teams on complex problems.",
        "scale_bounds": AGREEMENT_SCALE,
    },
    {
        "id": "psych_6",
        "type": "scaled",
        "category": "disposition",
        "section": "Work Style",
        "prompt": "I thrive when working on open-ended, exploratory projects.",
        "scale_bounds": AGREEMENT_SCALE,
    },
]

# --- Part 2: Domain knowledge (technical readiness) ---
DOMAIN_KNOWLEDGE_QUESTIONS = [
    {
        "id": "tech_1",
        "type": "single-choice",
        "category": "domain-knowledge",
        "section": "IoT Knowledge",
        "prompt": "What is a digital twin in urban planning?",
        "options": [
            {"text": "A virtual replica of physical city infrastructure for simulation and monitoring", "tier": "best"},
            {"text": "A backup system for city databases", "tier": "neutral"},
            {"text": "A secondary data center for redundancy", "tier": "neutral"},
            {"text": "I'm not familiar with this concept", "tier": "unfamiliar"},
        ],
    },
    {
        "id": "tech_2",
        "type": "single-choice",
        "category": "domain-knowledge",
        "section": "Smart Systems",
        "prompt": "Which of the following is a smart utility system?",
        "options": [
            {"text": "Traditional water meter reading", "tier": "neutral"},
            {"text": "Smart grid with real-time energy monitoring", "tier": "best"},
            {"text": "Manual traffic light operation", "tier": "neutral"},
            {"text": "Paper-based waste collection scheduling", "tier": "neutral"},
        ],
    },
    {
        "id": "tech_3",
        "type": "single-choice",
        "category": "domain-knowledge",
        "section": "IoT Protocols",
        "prompt": "Which protocol is commonly used in IoT communications?",
        "options": [
            {"text": "MQTT", "tier": "best"},
            {"text": "HTML", "tier": "neutral"},
            {"text": "CSS", "tier": "neutral"},
            {"text": "I'm not sure", "tier": "unfamiliar"},
        ],
    },
    {
        "id": "tech_4",
        "type": "single-choice",
        "category": "domain-knowledge",
        "section": "Urban Systems",
        "prompt": "How can traffic flow be optimized in smart cities?",
        "options": [
            {"text": "Using AI to analyze traffic patterns and adjust signals in real-time", "tier": "best"},
            {"text": "Installing more traffic lights", "tier": "neutral"},
            {"text": "Reducing the number of roads", "tier": "neutral"},
            {"text": "I don't know", "tier": "unfamiliar"},
        ],
    },
]

# --- Part 3: Readiness framework (WISCAR) ---
READINESS_FRAMEWORK_QUESTIONS = [
    {
        "id": "wiscar_1",
        "type": "scaled",
        "category": "readiness-framework",
        "section": "Will (Persistence)",
        "prompt": "I stick to long-term goals despite obstacles.",
        "scale_bounds": {"low": "Never", "high": "Always"},
    },
    {
        "id": "wiscar_2",
        "type": "scaled",
        "category": "readiness-framework",
        "section": "Interest",
        "prompt": "I find the concept of future cities fascinating.",
        "scale_bounds": {"low": "Not at all", "high": "Extremely"},
    },
    {
        "id": "wiscar_3",
        "type": "scaled",
        "category": "readiness-framework",
        "section": "Ability to Learn",
        "prompt": "I see feedback as an opportunity to improve.",
        "scale_bounds": {"low": "Rarely", "high": "Always"},
    },
    {
        "id": "wiscar_4",
        "type": "binary",
        "category": "readiness-framework",
        "section": "Real-World Alignment",
        "prompt": "Would you enjoy coordinating a smart energy system deployment across multiple city departments?",
        "options": [
            {"text": "Yes, that sounds exciting", "tier": "positive"},
            {"text": "No, that seems overwhelming", "tier": "negative"},
        ],
    },
    {
        "id": "wiscar_5",
        "type": "scaled",
        "category": "readiness-framework",
        "section": "Cognitive Readiness",
        "prompt": "I enjoy solving complex problems that require considering multiple interconnected systems.",
        "scale_bounds": AGREEMENT_SCALE,
    },
]

ASSESSMENT_QUESTIONS = DISPOSITION_QUESTIONS + DOMAIN_KNOWLEDGE_QUESTIONS + READINESS_FRAMEWORK_QUESTIONS

DIMENSION_SOURCES = {
    "persistence": "wiscar_1",
    "interest": "wiscar_2",
    "ability_to_learn": "wiscar_3",
    "real_world_alignment": "wiscar_4",
    "cognitive": "wiscar_5",
}

DEFAULT_CATALOG_DATA = {
    "version": CATALOG_VERSION,
    "title": CATALOG_TITLE,
    "questions": ASSESSMENT_QUESTIONS,
    "dimension_sources": DIMENSION_SOURCES,
}
