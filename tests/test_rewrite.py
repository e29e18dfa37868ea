import pytest

from app.errors import Failure, FailureCause
from app.models import RewriteRequest
from app.rewrite import build_prompt, parse_rewrite_request


@pytest.mark.parametrize("body", [None, "text", [], {}, {"text": None}, {"text": 1.5}, {"text": ""}])
def test_parse_rejects_missing_text(body):
    out = parse_rewrite_request(body)
    assert isinstance(out, Failure)
    assert out.cause is FailureCause.INVALID_INPUT
    assert out.error == "Missing text"


@pytest.mark.parametrize("context", [None, "", 0, 42, ["a"]])
def test_parse_defaults_context(context):
    out = parse_rewrite_request({"text": "T2 lumineux", "context": context})
    assert out == RewriteRequest(text="T2 lumineux", context="Not provided")


def test_parse_keeps_text_untouched():
    raw = "  T2 lumineux,\n 45 m² — proche gare  "
    out = parse_rewrite_request({"text": raw, "context": "Location"})
    assert out.text == raw
    assert out.context == "Location"


def test_prompt_embeds_text_verbatim():
    text = "Prix: {price} € <b>négociable</b> 100% \"calme\""
    prompt = build_prompt(RewriteRequest(text=text, context="Vente"), language="French")

    assert prompt.startswith("You are a real-estate assistant.\n\n")
    assert f"Original description: {text}" in prompt
    assert "Context: Vente" in prompt
    assert "Keep the text in French." in prompt


def test_prompt_is_deterministic():
    req = RewriteRequest(text="Maison avec jardin")
    assert build_prompt(req, language="French") == build_prompt(req, language="French")
