"""Prompt construction for script generation."""

from .models import ScriptData

# Sections every generated script must contain, in order
SCRIPT_SECTIONS = [
    "Hook (first 15 seconds)",
    "Introduction presenting the problem or topic",
    "Main content development (divided into sections)",
    "Call to action for subscriptions and likes",
    "Conclusion and next steps",
    "Outro (end of the video)",
]


def build_prompt(script_data: ScriptData) -> str:
    """Render a script request into a single instruction for a text model.

    Args:
        script_data: Form fields collected from the user.

    Returns:
        The prompt text. Identical input always gives identical output.
    """
    prompt_parts = [
        "Create a detailed script for a YouTube video with the following specifications:",
        "",
        f"**Topic:** {script_data.topic}",
        f"**Duration:** {script_data.duration.value} minutes",
        f"**Style:** {script_data.style.value}",
        f"**Style keywords:** {script_data.style_keywords or 'none'}",
        f"**Language:** {script_data.language}",
        f"**Target audience:** {script_data.audience or 'general'}",
        f"**Additional information:** {script_data.additional_info or 'none'}",
        "",
        "The script must include:",
    ]

    prompt_parts.extend(
        f"{i}. {section}" for i, section in enumerate(SCRIPT_SECTIONS, start=1)
    )

    prompt_parts.extend([
        "",
        "Format the script clearly, with the approximate timing of each section.",
        f"Write the entire script in {script_data.language_name}.",
        "Use engaging language suited to YouTube.",
        "Include suggestions for visual elements where relevant.",
    ])

    return "\n".join(prompt_parts)
