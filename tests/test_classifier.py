import json

from bloxi_tools.classifier import (
    MODEL_CONFIRMATION,
    ReplyKind,
    classify_debug_reply,
    classify_model_reply,
)

MSD_MODEL = {
    "blocks": [
        {"type": "Sine Wave", "name": "Sine1", "amplitude": "5", "frequency": "1"},
        {"type": "Sum", "name": "SumForces", "inputs": "+--"},
        {"type": "Gain", "name": "Gain_mass", "value": "1"},
        {"type": "Integrator", "name": "Int_velocity"},
        {"type": "Integrator", "name": "Int_displacement"},
        {"type": "Gain", "name": "Gain_damper", "value": "3"},
        {"type": "Gain", "name": "Gain_spring", "value": "2"},
        {"type": "Scope", "name": "Scope1"},
    ],
    "connections": [
        {"src": "Sine1/1", "dst": "SumForces/1"},
        {"src": "SumForces/1", "dst": "Gain_mass/1"},
        {"src": "Gain_mass/1", "dst": "Int_velocity/1"},
        {"src": "Int_velocity/1", "dst": "Int_displacement/1"},
        {"src": "Int_displacement/1", "dst": "Scope1/1"},
        {"src": "Int_velocity/1", "dst": "Gain_damper/1"},
        {"src": "Gain_damper/1", "dst": "SumForces/2"},
        {"src": "Int_displacement/1", "dst": "Gain_spring/1"},
        {"src": "Gain_spring/1", "dst": "SumForces/3"},
    ],
    "layout": {
        "Sine1": [50, 100], "SumForces": [150, 100], "Gain_mass": [250, 100],
        "Int_velocity": [350, 100], "Int_displacement": [450, 100],
        "Gain_damper": [350, 200], "Gain_spring": [450, 250], "Scope1": [550, 100],
    },
}


def test_clarification_reply_is_surfaced_exactly():
    text = json.dumps({"type": "clarification", "reply": "What does x represent?"})
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.CLARIFICATION
    assert res.reply == "What does x represent?"
    assert res.payload == {}
    assert res.response_type == "clarification"


def test_model_payload_is_passed_through_verbatim():
    res = classify_model_reply(json.dumps(MSD_MODEL))
    assert res.kind is ReplyKind.MODEL
    assert res.reply == MODEL_CONFIRMATION == "Here is your Bloxi model."
    assert res.payload == MSD_MODEL
    assert list(res.payload["layout"]) == list(MSD_MODEL["layout"])


def test_connections_alone_is_a_model():
    res = classify_model_reply('{"connections": [{"src": "A/1", "dst": "B/1"}]}')
    assert res.kind is ReplyKind.MODEL
    assert res.payload == {"connections": [{"src": "A/1", "dst": "B/1"}]}


def test_blocks_key_with_empty_list_is_a_model():
    res = classify_model_reply('{"blocks": []}')
    assert res.response_type == "model"


def test_invalid_json_falls_back_to_clarification_with_trimmed_text():
    text = "  Sure! Could you tell me the mass of the cart?\n"
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.UNRECOGNIZED
    assert res.response_type == "clarification"
    assert res.reply == "Sure! Could you tell me the mass of the cart?"


def test_unexpected_json_object_echoes_raw_text():
    text = '{"message": "hello"}'
    res = classify_model_reply(text)
    assert res.response_type == "clarification"
    assert res.reply == text


def test_json_scalar_or_list_echoes_raw_text():
    for text in ('"just a string"', "42", "[1, 2, 3]", "null"):
        res = classify_model_reply(text)
        assert res.response_type == "clarification"
        assert res.reply == text


def test_clarification_with_non_string_reply_is_unrecognized():
    text = '{"type": "clarification", "reply": 7}'
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.UNRECOGNIZED
    assert res.reply == text


def test_clarification_wins_over_blocks():
    text = '{"type": "clarification", "reply": "Which input?", "blocks": []}'
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.CLARIFICATION
    assert res.reply == "Which input?"


def test_markdown_fenced_model_is_parsed():
    text = "```json\n" + json.dumps(MSD_MODEL) + "\n```"
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.MODEL
    assert res.payload == MSD_MODEL


def test_model_variant_ignores_feedback_type():
    text = '{"type": "feedback", "reply": "Check the gain."}'
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.UNRECOGNIZED
    assert res.reply == text


def test_debug_feedback():
    res = classify_debug_reply('{"type": "feedback", "reply": "Your Sum sign is flipped."}')
    assert res.kind is ReplyKind.FEEDBACK
    assert res.response_type == "feedback"
    assert res.reply == "Your Sum sign is flipped."


def test_debug_clarification():
    res = classify_debug_reply('{"type": "clarification", "reply": "Can you zoom in on the Sum?"}')
    assert res.response_type == "clarification"
    assert res.reply == "Can you zoom in on the Sum?"


def test_debug_variant_does_not_treat_blocks_as_model():
    text = '{"blocks": [{"type": "Gain", "name": "G"}]}'
    res = classify_debug_reply(text)
    assert res.kind is ReplyKind.UNRECOGNIZED
    assert res.reply == text


def test_debug_plain_text_falls_back_to_clarification():
    res = classify_debug_reply("The integrator has no initial condition set.")
    assert res.response_type == "clarification"
    assert res.reply == "The integrator has no initial condition set."


def test_classification_is_deterministic():
    text = json.dumps(MSD_MODEL)
    assert classify_model_reply(text) == classify_model_reply(text)


def test_deeply_nested_reply_falls_back_to_clarification():
    text = "[" * 200000 + "]" * 200000
    res = classify_model_reply(text)
    assert res.kind is ReplyKind.UNRECOGNIZED
    assert res.reply == text


def test_nan_and_infinity_are_not_json():
    for text in ('{"blocks": [], "layout": {"A": [NaN, 1]}}', '{"connections": [], "gain": Infinity}'):
        res = classify_model_reply(text)
        assert res.kind is ReplyKind.UNRECOGNIZED
        assert res.reply == text
