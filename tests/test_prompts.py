from boostme.services import prompts


PROFILE = {"name": "Dina", "role": "Student", "goal": "Speak up in class", "note": ""}


def test_profile_block_placeholders():
    assert prompts.profile_block(None) == "No profile data provided."
    block = prompts.profile_block({"name": "Dina"})
    assert "- Name: Dina" in block
    assert "- Role: Not specified" in block
    assert "- Note: None" in block


def test_system_instruction_has_persona_profile_mode_and_language():
    text = prompts.system_instruction(PROFILE, "reflect", "Indonesian")
    assert text.startswith(prompts.SYSTEM_PERSONA)
    assert "- Confidence Goal: Speak up in class" in text
    assert "Mode: Emotional Reflection" in text
    assert text.endswith("Respond in Indonesian.")


def test_unknown_mode_uses_chat_instruction():
    assert prompts.mode_instruction("poetry") == prompts.MODE_INSTRUCTIONS["chat"]


def test_build_prompt_ends_with_user_message():
    text = prompts.build_prompt("chat", "I have a presentation tomorrow", PROFILE)
    assert text.endswith('User says: "I have a presentation tomorrow"')


def test_build_prompt_tools_modes():
    assert '"tired"' in prompts.build_prompt("motivation", "tired")
    assert 'Task: "Write my thesis".' in prompts.build_prompt("task_breakdown", "Write my thesis")


def test_response_schema_only_for_structured_modes():
    assert prompts.response_schema("suggest_activities") == prompts.MISSIONS_SCHEMA
    assert prompts.response_schema("task_breakdown") == prompts.TASK_STEPS_SCHEMA
    assert prompts.response_schema("chat") is None
    assert prompts.response_schema("reflect") is None


def test_reflect_message():
    text = prompts.reflect_message(7, "tired", "long day")
    assert "- Confidence Score: 7/10" in text
    assert '- Note: "long day"' in text


def test_build_contents_orders_history_then_message():
    history = [
        {"role": "user", "text": "Hi"},
        {"role": "model", "text": "Hello!"},
        {"role": "model", "text": ""},
    ]
    contents = prompts.build_contents("Help me", history)
    assert [item["role"] for item in contents] == ["user", "model", "user"]
    assert contents[-1]["parts"][0]["text"] == "Help me"
