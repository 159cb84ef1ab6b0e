from enum import Enum


class DisabilityType(str, Enum):
    visual = "Visual"
    hearing = "Hearing"
    mobility = "Mobility"
    cognitive = "Cognitive"
    chronic_illness = "Chronic illness"
    mental_health = "Mental health"
    learning_disability = "Learning disability"
    multiple = "Multiple disabilities"
    other = "Other"


class AccessibilityNeed(str, Enum):
    wheelchair_venues = "Wheelchair accessible venues"
    ground_floor = "Ground floor access"
    large_print = "Large print materials"
    sign_language = "Sign language interpretation"
    audio_descriptions = "Audio descriptions"
    quiet_environments = "Quiet environments"
    well_lit = "Well-lit spaces"
    simple_language = "Simple language"
    visual_alerts = "Visual alerts"
    tactile_guidance = "Tactile guidance"


class CommunicationPreference(str, Enum):
    text_messages = "Text messages"
    voice_calls = "Voice calls"
    video_calls = "Video calls"
    email = "Email"
    asl = "Sign language (ASL)"
    bsl = "Sign language (BSL)"
    written_notes = "Written notes"
    voice_messages = "Voice messages"
