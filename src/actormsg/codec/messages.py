"""
Builders for user-facing messages and nested function call requests.

Shapes produced:
    {"to_user_message" : "<text>"}
    {"function_component":{"actor_name":...,"function_name":...,"function_parameters":{...}}}

Each shape has a standalone builder and a merge variant that inserts (or
overwrites) the top-level key of an existing document.

Notes:
    - build_user_message inserts the text verbatim by default, matching the
      reference wire format; a text containing ``"``, ``\\`` or control characters
      then yields invalid JSON. Set CodecSettings.escape_user_message to escape it.
      merge_user_message always escapes.
    - Merging into a document whose root is not an object returns it unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping

from actormsg.config import CodecSettings
from actormsg.core.constants import (
    ACTOR_NAME_KEY,
    FUNCTION_COMPONENT_KEY,
    FUNCTION_NAME_KEY,
    FUNCTION_PARAMETERS_KEY,
    TO_USER_MESSAGE_KEY,
)
from actormsg.core.serde import json_dumps_canonical
from actormsg.core.typing import JsonDict
from actormsg.core.values import TaggedValue

from .encode import encode_map, merge_document, wrap_standalone

__all__ = [
    "build_user_message",
    "merge_user_message",
    "build_function_request",
    "merge_function_request",
]


def build_user_message(text: str, settings: CodecSettings | None = None) -> str:
    """
    Build a fresh ``to_user_message`` document.

    Args:
        text (str): Message for the user.
        settings (CodecSettings | None): Output options; escaping is off by default.

    Returns:
        str: JSON document text.

    Examples:
        >>> build_user_message("done")
        '{"to_user_message" : "done"}'
    """
    s = settings or CodecSettings()
    body = json_dumps_canonical(text) if s.escape_user_message else f'"{text}"'
    return wrap_standalone(TO_USER_MESSAGE_KEY, body, s)


def merge_user_message(text: str, base_text: str) -> str:
    """
    Insert ``to_user_message`` into an existing document.

    Raises:
        DecodeError: If base_text is not valid JSON.
    """
    return merge_document(base_text, TO_USER_MESSAGE_KEY, text)


def _function_component(
    actor_name: str, function_name: str, parameters: Mapping[str, TaggedValue]
) -> JsonDict:
    return {
        ACTOR_NAME_KEY: actor_name,
        FUNCTION_NAME_KEY: function_name,
        FUNCTION_PARAMETERS_KEY: encode_map(parameters),
    }


def build_function_request(
    actor_name: str, function_name: str, parameters: Mapping[str, TaggedValue]
) -> str:
    """
    Build a fresh request asking actor_name to run function_name with parameters.

    Args:
        actor_name (str): Target actor.
        function_name (str): Function exposed by the target actor.
        parameters (Mapping[str, TaggedValue]): Function arguments.

    Returns:
        str: Compact canonical JSON document text.

    Raises:
        EncodeError: If a parameter holds a non-finite float.

    Examples:
        >>> from actormsg.core.values import U64Value
        >>> build_function_request("channel_A", "start", {"n": U64Value(value=5)})
        '{"function_component":{"actor_name":"channel_A","function_name":"start","function_parameters":{"n":5}}}'
    """
    component = _function_component(actor_name, function_name, parameters)
    return json_dumps_canonical({FUNCTION_COMPONENT_KEY: component})


def merge_function_request(
    actor_name: str,
    function_name: str,
    parameters: Mapping[str, TaggedValue],
    base_text: str,
) -> str:
    """
    Insert a ``function_component`` request into an existing document.

    Raises:
        DecodeError: If base_text is not valid JSON.
        EncodeError: If a parameter holds a non-finite float.
    """
    component = _function_component(actor_name, function_name, parameters)
    return merge_document(base_text, FUNCTION_COMPONENT_KEY, component)
