"""Prompt assembly for every coaching mode.

Both the direct transport and the relay build prompts here so the two paths
send the provider the same text.
"""
from __future__ import annotations

MODES = ("chat", "reflect", "suggest_activities", "motivation", "task_breakdown")

SYSTEM_PERSONA = """You are BoostMe Coach, a warm best-friend style confidence coach.
Your tone is emotionally safe, friendly, supportive, and non-judgmental.
Your primary goals:
- increase confidence
- help user feel understood
- give simple emotional guidance
- offer small actionable steps

You must always connect your advice to the user's personal profile."""

MODE_INSTRUCTIONS = {
    "chat": """Mode: Chat
Task:
- Respond naturally like a supportive best friend
- Reference user's role and goal
- Offer 1-2 practical actions""",
    "reflect": """Mode: Emotional Reflection
Task:
- Reflect the user's emotions
- Validate feelings
- Offer emotional insight and simple next steps
- Reply shortly (max 2 sentences)""",
    "suggest_activities": """Mode: Suggest Daily Activities
Task:
- Provide 3-5 short confidence-boosting activities
- Must match user's role, goal, and emotional context
- Keep tone warm and friendly
IMPORTANT: Return response ONLY as a JSON object with a "missions" array of strings.""",
}

MISSIONS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "missions": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        },
    },
}

TASK_STEPS_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "title": {"type": "STRING", "description": "A short title for the step"},
            "description": {"type": "STRING", "description": "One sentence explaining what to do"},
            "duration": {"type": "STRING", "description": "Estimated time (e.g., '10 mins')"},
        },
        "required": ["title", "description", "duration"],
    },
}


def response_schema(mode):
    if mode == "suggest_activities":
        return MISSIONS_SCHEMA
    if mode == "task_breakdown":
        return TASK_STEPS_SCHEMA
    return None


def profile_block(profile):
    if not profile:
        return "No profile data provided."
    return "\n".join(
        [
            "User Profile:",
            f"- Name: {profile.get('name') or 'Unknown'}",
            f"- Role: {profile.get('role') or 'Not specified'}",
            f"- Confidence Goal: {profile.get('goal') or 'Not specified'}",
            f"- Note: {profile.get('note') or 'None'}",
        ]
    )


def mode_instruction(mode):
    return MODE_INSTRUCTIONS.get(mode, MODE_INSTRUCTIONS["chat"])


def system_instruction(profile, mode="chat", language="English"):
    return "\n\n".join(
        [
            SYSTEM_PERSONA,
            profile_block(profile),
            mode_instruction(mode),
            f"Respond in {language}.",
        ]
    )


def reflect_message(score, mood, note):
    return "\n".join(
        [
            "User Check-in:",
            f"- Confidence Score: {score}/10",
            f"- Mood: {mood}",
            f'- Note: "{note or ""}"',
        ]
    )


def motivation_prompt(mood):
    return (
        f'Generate a short, powerful motivational quote or affirmation for someone feeling "{mood}".\n'
        "Limit to one sentence, under 20 words.\n"
        "Make it inspiring and uplifting."
    )


def task_breakdown_prompt(task_description):
    return (
        "Break down the following task into 3 to 6 actionable, concrete steps.\n"
        f'Task: "{task_description}".\n'
        "Make the steps specific and easy to start."
    )


def build_prompt(mode, message, profile=None, language="English"):
    """Full single-turn prompt; the user's content always comes last."""
    if mode == "motivation":
        return motivation_prompt(message)
    if mode == "task_breakdown":
        return task_breakdown_prompt(message)
    return f'{system_instruction(profile, mode, language)}\n\nUser says: "{message}"'


def build_contents(message, history=None):
    """Gemini ``contents`` for a chat turn: prior turns, then the new message."""
    contents = []
    for item in history or []:
        text = str(item.get("text") or "")
        if not text:
            continue
        role = "model" if item.get("role") == "model" else "user"
        contents.append({"role": role, "parts": [{"text": text}]})
    contents.append({"role": "user", "parts": [{"text": message}]})
    return contents
