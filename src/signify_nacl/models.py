from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class SignatureFragment(BaseModel):
    """The ``{"naclSig":"<base64>"}`` tail cut off a signed JSON document.

    Exactly one key is allowed and its value must already be a string; no
    coercion takes place.
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    nacl_sig: str = Field(alias="naclSig")
