"""
LangChain <-> Langfuse prompt converter.

Flow prompts are mustache templates, which already use Langfuse's {{variable}}
syntax, so conversion only maps message roles between the two formats.
Single-brace f-string variables are still promoted to {{variable}} so a
plain ChatPromptTemplate can be registered as well.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import TypedDict

from langchain_core.prompts import ChatPromptTemplate
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

_TO_LANGCHAIN_ROLE = {"system": "system", "user": "human", "assistant": "ai"}


class LangfuseMessage(TypedDict):
    """Langfuse chat message format."""

    role: str
    content: str


def _convert_variables(content: str) -> str:
    """
    Convert f-string variable syntax to Langfuse format.

    Mustache tags ({{var}}, {{{var}}}, {{#list}}) are left untouched.

    Args:
        content: Template string

    Returns:
        str: Template string with Langfuse variables
    """
    pattern = r"(?<!\{)\{([^{}]+)\}(?!\})"
    return re.sub(pattern, r"{{\1}}", content)


def _get_role_from_message(message: object) -> str:
    """
    Extract Langfuse role from a LangChain message template.

    Raises:
        ValueError: If message type is unsupported
    """
    if isinstance(message, SystemMessagePromptTemplate):
        return "system"
    if isinstance(message, HumanMessagePromptTemplate):
        return "user"
    if isinstance(message, AIMessagePromptTemplate):
        return "assistant"

    raise ValueError(f"Unsupported message type: {type(message)}")


def _get_content_from_message(message: object) -> str:
    """Extract content template string from a LangChain message template."""
    if hasattr(message, "prompt") and hasattr(message.prompt, "template"):
        return str(message.prompt.template)

    raise ValueError(f"Cannot extract content from: {type(message)}")


def convert_chat_template(template: ChatPromptTemplate) -> list[LangfuseMessage]:
    """
    Convert LangChain ChatPromptTemplate to Langfuse message format.

    Args:
        template: LangChain ChatPromptTemplate instance

    Returns:
        list[LangfuseMessage]: List of Langfuse-formatted messages

    Raises:
        ValueError: If template contains unsupported message types

    Example:
        >>> template = ChatPromptTemplate.from_messages(
        ...     [("system", "You are {{{role}}}")], template_format="mustache"
        ... )
        >>> convert_chat_template(template)[0]
        {'role': 'system', 'content': 'You are {{{role}}}'}
    """
    messages: list[LangfuseMessage] = []

    for msg in template.messages:
        role = _get_role_from_message(msg)
        content = _convert_variables(_get_content_from_message(msg))
        messages.append(LangfuseMessage(role=role, content=content))

    return messages


def convert_langfuse_messages(messages: list[dict]) -> ChatPromptTemplate:
    """
    Build a mustache ChatPromptTemplate from Langfuse chat messages.

    Args:
        messages: Langfuse chat prompt messages ({"role", "content"} dicts)

    Returns:
        ChatPromptTemplate: Mustache-formatted template

    Raises:
        ValueError: If a message role is unknown
    """
    converted: list[tuple[str, str]] = []
    for message in messages:
        role = str(message.get("role", "")).lower()
        if role not in _TO_LANGCHAIN_ROLE:
            raise ValueError(f"Unsupported Langfuse role: {role!r}")
        converted.append((_TO_LANGCHAIN_ROLE[role], str(message.get("content", ""))))

    return ChatPromptTemplate.from_messages(converted, template_format="mustache")
