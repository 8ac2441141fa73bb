"""Parser feature flags and the named presets built from them"""

from pydantic import BaseModel, ConfigDict


class ParserOptions(BaseModel):
    """Which marker rules the classifier honours. A disabled rule falls through to the next one."""
    model_config = ConfigDict(frozen=True)

    headings:        bool = True    # '#', '##', '###' prefixes
    bold_headings:   bool = True    # whole-line '**...**' rendered as a heading
    ordered_lists:   bool = True    # 'N. ' items
    unordered_lists: bool = True    # '* ' items
    inline_bold:     bool = True    # '**...**' spans inside paragraphs


PRESETS: dict[str, ParserOptions] = {
    "full":    ParserOptions(),
    "info":    ParserOptions(bold_headings=False, unordered_lists=False),
    "qa":      ParserOptions(headings=False, ordered_lists=False, inline_bold=False),
    "history": ParserOptions(bold_headings=False),
}

DEFAULT_PRESET = "full"


def get_preset(name: str) -> ParserOptions:
    """Return the ParserOptions registered under name."""
    try:
        return PRESETS[name]
    except KeyError:
        known = ", ".join(PRESETS)
        raise ValueError(f"Unknown parser preset '{name}' (expected one of: {known})") from None
