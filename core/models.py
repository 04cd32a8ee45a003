"""
CAESAR TOOLKIT - Request models.
One variant per mode, discriminated on the "mode" field: encode/decode carry a
required shift, auto carries a language, rot13/brute carry neither.
"""

from typing import Annotated, Any, Dict, Literal, Union
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

from core.config import settings

MODES = ("auto", "encode", "decode", "rot13", "brute")


class _CipherRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)
    text: str


class EncodeRequest(_CipherRequest):
    mode: Literal["encode"]
    shift: StrictInt


class DecodeRequest(_CipherRequest):
    mode: Literal["decode"]
    shift: StrictInt


class Rot13Request(_CipherRequest):
    mode: Literal["rot13"]


class BruteRequest(_CipherRequest):
    mode: Literal["brute"]


class AutoRequest(_CipherRequest):
    mode: Literal["auto"]
    language: str = Field(default_factory=lambda: settings.DEFAULT_LANGUAGE)


CipherRequest = Annotated[
    Union[EncodeRequest, DecodeRequest, Rot13Request, BruteRequest, AutoRequest],
    Field(discriminator="mode"),
]

cipher_request_adapter: TypeAdapter = TypeAdapter(CipherRequest)


@dataclass(frozen=True)
class HandlerResponse:
    """JSON payload plus HTTP-style status (200 ok, 400 bad input, 500 internal)."""
    status_code: int
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200
