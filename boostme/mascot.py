from boostme.constants import JOY_WORDS, MASCOT_MESSAGES, STRESS_WORDS, CHAT_MASCOT_INTRO


def map_mood(score):
    """Mascot mood for today's confidence score; None means no check-in yet."""
    if score is None:
        return "neutral"
    if score >= 8:
        return "proud"
    if score >= 6:
        return "happy"
    if score >= 4:
        return "worried"
    return "low"


def mascot_for_score(score):
    mood = map_mood(score)
    return mood, MASCOT_MESSAGES[mood]


def mascot_for_checkin(record):
    if not record:
        return mascot_for_score(None)
    try:
        score = int(record.get("score"))
    except (TypeError, ValueError):
        return mascot_for_score(None)
    return mascot_for_score(score)


def mood_from_text(text):
    lowered = (text or "").lower()
    if any(word in lowered for word in STRESS_WORDS):
        return "worried", "Okay, I hear how you feel. Let's talk it through 🫶"
    if any(word in lowered for word in JOY_WORDS):
        return "happy", "Yay, I'm really happy for you! 🎉"
    return "neutral", "Tell me about it. I'm always here to listen 🌿"


def chat_intro():
    return "neutral", CHAT_MASCOT_INTRO
