"""
Wire keys and numeric bounds for actor message documents.

Defines the recognized top-level keys of an actor message and the integer ranges
enforced by tagged value construction and decoder narrowing. This module is
zero-IO and uses only the Python standard library.

Notes:
    - Key names are part of the wire contract shared with other actors; changing
      them breaks interoperability.
    - Bounds are inclusive.
"""

from __future__ import annotations

__all__ = [
    "ACTOR_NAME_KEY",
    "PARAMETERS_KEY",
    "VIRTUAL_PARAMETERS_KEY",
    "FUNCTION_PARAMETERS_KEY",
    "FUNCTION_NAME_KEY",
    "FUNCTION_COMPONENT_KEY",
    "TO_USER_MESSAGE_KEY",
    "STANDALONE_SEPARATOR",
    "I16_MIN",
    "I16_MAX",
    "I32_MIN",
    "I32_MAX",
    "I64_MIN",
    "I64_MAX",
    "U8_MAX",
    "U16_MAX",
    "U32_MAX",
    "U64_MAX",
]

ACTOR_NAME_KEY: str = "actor_name"
PARAMETERS_KEY: str = "parameters"
VIRTUAL_PARAMETERS_KEY: str = "virtual_parameters"
FUNCTION_PARAMETERS_KEY: str = "function_parameters"
FUNCTION_NAME_KEY: str = "function_name"
FUNCTION_COMPONENT_KEY: str = "function_component"
TO_USER_MESSAGE_KEY: str = "to_user_message"

# Written between the wrapping key and its object in standalone documents.
STANDALONE_SEPARATOR: str = " : "

I16_MIN: int = -(2**15)
I16_MAX: int = 2**15 - 1
I32_MIN: int = -(2**31)
I32_MAX: int = 2**31 - 1
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

U8_MAX: int = 2**8 - 1
U16_MAX: int = 2**16 - 1
U32_MAX: int = 2**32 - 1
U64_MAX: int = 2**64 - 1
