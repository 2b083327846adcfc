# convert/__init__.py

from .rich_style import from_rich_color, from_rich_style, from_rich_text, to_rich_color, to_rich_style
from .prompt_style import from_formatted_text, from_style_str, to_formatted_text, to_style_str

__all__ = [
    'from_formatted_text',
    'from_rich_color',
    'from_rich_style',
    'from_rich_text',
    'from_style_str',
    'to_formatted_text',
    'to_rich_color',
    'to_rich_style',
    'to_style_str',
]
