import json
import re

from utils.errors import MalformedCompletionContent

CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*\n|\n?```\s*$", re.DOTALL)


def extract_possible_json(text):
    """
    Try to extract the first JSON object using a regex (as a last resort fallback).
    """
    match = re.search(r'({.*})', text, re.DOTALL)
    if match:
        return match.group(1).strip()
    return None


def parse_json_content(response_text, section_name="completion"):
    """
    Decode the text content of a completion into a JSON object.

    Strips markdown code fences, tries a direct parse, then falls back to the
    outermost {...} block. Raises MalformedCompletionContent when no JSON
    object can be recovered.
    """
    response_text = (response_text or "").strip()
    if not response_text:
        raise MalformedCompletionContent(f"Empty content for '{section_name}'")

    # Step 1: Clean markdown-style JSON wrapping like ```json
    cleaned_text = CODE_FENCE_PATTERN.sub("", response_text).strip()

    # Step 2: First attempt to parse directly
    try:
        parsed = json.loads(cleaned_text)
    except json.JSONDecodeError:
        parsed = None

    # Step 3: Try to extract JSON using fallback
    if parsed is None:
        extracted = extract_possible_json(response_text)
        if extracted:
            try:
                parsed = json.loads(extracted)
            except json.JSONDecodeError:
                parsed = None

    if not isinstance(parsed, dict):
        raise MalformedCompletionContent(
            f"Content for '{section_name}' is not a JSON object",
            detail={"section": section_name, "raw_response": response_text[:500]},
        )
    return parsed
