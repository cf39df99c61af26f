"""Prompt builders for the legal analysis, general chat and case-law features."""

from __future__ import annotations

from typing import NamedTuple


class PromptSpec(NamedTuple):
    system_prompt: str
    user_prompt: str
    temperature: float
    max_tokens: int


_LEGAL_ANALYSIS_SYSTEM = (
    "You are a legal assistant specializing in Indian Penal Code (IPC). "
    "Always format your responses using proper markdown with clear headers and consistent structure."
)

_LEGAL_ANALYSIS_TEMPLATE = """
Analyze the following scenario and provide a detailed legal analysis according to the Indian Penal Code (IPC).

Scenario: {query}

Ensure your response follows this EXACT format with proper markdown formatting:

## Applicable IPC Sections
For each applicable section, use this format:
- **Section XXX - [Section Title]**: Brief description of the section

## Explanation
Detailed explanation of why and how these sections apply to the scenario. Use clear paragraphs with proper spacing.

## Potential Legal Consequences
Detailed information about potential punishments and penalties for each applicable section.

Important formatting instructions:
1. Use markdown headings with ## for main sections
2. Use bold (**) for section numbers and titles
3. Use bullet points (-) for listing sections
4. Use proper paragraph spacing between sections
"""

_GENERAL_CHAT_SYSTEM = (
    "You are a helpful assistant specializing in legal information. "
    "Answer questions clearly and concisely with proper formatting and structure. "
    "Remember that you're not providing legal advice - just general information. "
    "When discussing legal concepts, be accurate and explain them in simple terms."
)

_GENERAL_CHAT_TEMPLATE = """
Answer the following question with detailed information and proper structure.

Question: {query}

Ensure your response follows this format with proper markdown formatting:

## Answer
Provide a comprehensive answer to the question with clear explanations.

## Key Points
- **Point 1**: Important information relating to the question
- **Point 2**: Additional relevant information
- (Add more points as needed)

## Additional Information
Any supplementary details or context that might be helpful.

Important formatting instructions:
1. Use markdown headings with ## for main sections
2. Use bold (**) for emphasizing key terms
3. Use bullet points (-) for listing information
4. Use proper paragraph spacing between sections
"""

_CASE_LAW_SYSTEM = (
    "You are a legal research assistant specialized in Indian case law. "
    "For the user's query, provide 3-5 relevant case law examples that address their issue. "
    "Format your response as a JSON array of case objects, each with title, citation, summary, "
    "and relevance fields. Make the summaries concise, focusing on the legal principles established."
)

_CASE_LAW_TEMPLATE = "Find relevant Indian case laws related to: {query}"


def build_legal_analysis_prompt(query: str) -> PromptSpec:
    return PromptSpec(
        system_prompt=_LEGAL_ANALYSIS_SYSTEM,
        user_prompt=_LEGAL_ANALYSIS_TEMPLATE.format(query=query),
        temperature=0.7,
        max_tokens=1500,
    )


def build_general_chat_prompt(query: str) -> PromptSpec:
    return PromptSpec(
        system_prompt=_GENERAL_CHAT_SYSTEM,
        user_prompt=_GENERAL_CHAT_TEMPLATE.format(query=query),
        temperature=0.7,
        max_tokens=1200,
    )


def build_case_law_prompt(query: str) -> PromptSpec:
    """Case law runs cooler so the JSON array instruction is followed more often."""
    return PromptSpec(
        system_prompt=_CASE_LAW_SYSTEM,
        user_prompt=_CASE_LAW_TEMPLATE.format(query=query),
        temperature=0.3,
        max_tokens=1500,
    )
