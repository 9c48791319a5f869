"""
Pydantic schema for customer records.

A customer is just an integer identifier chosen by the caller and a
display name.  The same model is used for request bodies, responses
and the persisted JSON file.
"""

from pydantic import BaseModel, Field

# Identifiers are 32-bit signed integers.
ID_MIN = -(2 ** 31)
ID_MAX = 2 ** 31 - 1


class Customer(BaseModel):
    """A customer of the grocery store."""

    # Not generated and not checked for uniqueness.  Strict so that
    # booleans and numeric strings are rejected.
    id: int = Field(0, ge=ID_MIN, le=ID_MAX, strict=True, examples=[1])
    name: str = Field(..., min_length=1, examples=["Alice"])
