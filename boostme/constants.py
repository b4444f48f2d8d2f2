APP_NAME = "BoostMe"

PROFILE_DATA_KEY = "boostme_profile_data"
PROFILE_IMAGE_KEY = "boostme_profile_image"
LOGS_KEY = "boostme_logs"
MISSIONS_KEY_PREFIX = "boostme_missions_"
TOTAL_MISSIONS_KEY = "boostme_total_missions"
REMINDER_SETTINGS_KEY = "boostme_reminder_settings"
REMINDER_LAST_TRIGGER_KEY = "boostme_reminder_last_trigger"

PROFILE_FIELDS = ["name", "role", "goal", "note"]
DEFAULT_DISPLAY_NAME = "friend"

CHECKIN_MOODS = [
    ("confident", "Confident"),
    ("excited", "Excited"),
    ("tired", "Tired"),
    ("sad", "Sad"),
    ("worried", "Worried"),
    ("fear", "Afraid"),
    ("confused", "Confused"),
]
CHECKIN_MOOD_LABELS = {key: label for key, label in CHECKIN_MOODS}
MIN_SCORE = 1
MAX_SCORE = 10

MASCOT_MESSAGES = {
    "proud": "Amazing! You look really confident today. Be proud of yourself ✨",
    "happy": "You did well today. Hold on to good moments like this one 💛",
    "worried": "Looks like something is weighing on you today. We're right here with you 🤍",
    "low": "That's okay. Low-confidence days happen. Let's start with one small step together 🌧️➡️☀️",
    "neutral": "How are you feeling today? Try a quick check-in with us 🌱",
}
MASCOT_EMOJI = {
    "proud": "🤩",
    "happy": "😊",
    "worried": "😟",
    "low": "🥺",
    "neutral": "🙂",
}

CHAT_GREETING = "Hi! I'm BoostMe, your thinking buddy."
CHAT_CLEARED = "Chat cleared. Let's start fresh! What would you like to talk about today?"
CHAT_APOLOGY = "Sorry, I'm having trouble connecting right now. Please try again."
CHAT_MASCOT_INTRO = "Anything on your mind today, or something you'd like a boost with? Tell me 😊"
CHAT_MASCOT_CLEARED = "Fresh start! Is there anything I can help with today?"
STRESS_WORDS = ["stress", "anxious", "worried", "afraid", "scared", "nervous"]
JOY_WORDS = ["happy", "glad", "proud", "excited"]

REFLECT_EMPTY_FALLBACK = "Great job! Keep going, we're always by your side."
REFLECT_ERROR_FALLBACK = "It's okay. Tomorrow will be a better day, for sure."

MOTIVATION_EMPTY_FALLBACK = "You are stronger than you think."
MOTIVATION_ERROR_FALLBACK = "Keep going, you are doing great."
MOTIVATION_MOODS = ["procrastinating", "tired", "anxious", "excited", "stuck"]

DEFAULT_MISSIONS = [
    {"id": 1, "text": "Write down one thing you're proud of today", "completed": False},
    {"id": 2, "text": "Stand up straight and take 10 deep breaths", "completed": False},
    {"id": 3, "text": "Send a thank-you message to someone", "completed": False},
    {"id": 4, "text": "Smile at yourself in the mirror", "completed": False},
    {"id": 5, "text": "Drink a big glass of water right now", "completed": False},
]
INITIAL_MISSION_COUNT = 3
FALLBACK_MISSION_TEXTS = [
    "Smile at yourself in the mirror for 1 minute",
    "Write down 3 of your strengths",
    "Tidy up your desk",
]
MISSIONS_REQUEST = "Please suggest 3-5 daily activities that suit me today."

REMINDER_TYPES = ["checkin", "boost", "both"]
REMINDER_TYPE_LABELS = {
    "checkin": "Daily Check-in",
    "boost": "Boost Missions",
    "both": "Check-in and Missions",
}
DEFAULT_REMINDER_SETTINGS = {"enabled": False, "time": "09:00", "type": "checkin"}
REMINDER_TITLE = "BoostMe - Daily Reminder"
REMINDER_MESSAGES = {
    "checkin": "Time for your Daily Check-in! Let's see how you feel today 💛",
    "boost": "Time for Boost Missions! Try a small mission to build your confidence ✨",
    "both": "This is your time! Let's do the Daily Check-in and Boost Missions 😊",
}
REMINDER_INTERVAL_SECONDS = 60

