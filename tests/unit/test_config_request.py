from __future__ import annotations

import pytest
from pydantic import ValidationError

from encoder_captions.state import SessionConfig
from encoder_captions.handlers import SessionConfigRequest


def test_defaults_match_form() -> None:
    config = SessionConfigRequest().to_session_config()
    assert config == SessionConfig(host="", port=23, lines=2, clear_after_silence=True, silence_interval_s=5.0)


def test_accepts_form_and_field_names() -> None:
    by_alias = SessionConfigRequest.model_validate({"host": " enc ", "clearAfterInterval": False, "silenceInterval": 3})
    by_name = SessionConfigRequest(host="enc", clear_after_silence=False, silence_interval_s=3)
    assert by_alias.to_session_config() == by_name.to_session_config()
    assert by_alias.host == "enc"


@pytest.mark.parametrize("field,value", [("port", 0), ("port", 65536), ("lines", 0), ("lines", 11), ("silenceInterval", 0.5)])
def test_out_of_range_rejected(field: str, value: float) -> None:
    with pytest.raises(ValidationError):
        SessionConfigRequest.model_validate({field: value})


def test_round_trip_from_session() -> None:
    session = SessionConfig(host="10.1.1.1", port=2323, lines=10, clear_after_silence=False, silence_interval_s=60.0)
    assert SessionConfigRequest.from_session_config(session).to_session_config() == session
