from dataclasses import dataclass


@dataclass(frozen=True)
class ViewConfig:
    """
    Presentation settings for `selectbox.view.render`.

    Attributes:
        placeholder (str): Placeholder of the search input.
        no_match_text (str): Message shown when a search matches nothing.
        *_class (str): CSS class names of the rendered elements.
        *_glyph (str): Icon-font ligatures for the clear and arrow icons.
    """

    placeholder: str = "Search..."
    """Placeholder of the search input."""

    no_match_text: str = "No match found"
    """Message shown when the search text matches no item."""

    root_class: str = "searchable-select"
    open_class: str = "open"
    selected_class: str = "searchable-select-value"
    selected_text_class: str = "searchable-select-text"
    clear_class: str = "searchable-select-clear"
    icon_class: str = "material-icons"
    arrow_class: str = "searchable-select-arrow"
    dropdown_class: str = "searchable-select-dropdown"
    list_class: str = "searchable-select-list"
    item_class: str = "searchable-select-item"
    item_selected_class: str = "selected"
    no_match_class: str = "searchable-select-no-match"

    clear_glyph: str = "close"
    arrow_up_glyph: str = "keyboard_arrow_up"
    arrow_down_glyph: str = "keyboard_arrow_down"


DEFAULT_CONFIG = ViewConfig()
