import logging
from dataclasses import dataclass, field
from html import escape
from typing import List, Mapping, Optional, Tuple

from dataclasses_json import dataclass_json

from HTMLSelect import CLOSING_PREFIX, OPTION_PREFIX, SELECTED_ATTRIBUTE
from HTMLSelect.html_components import HTMLComponent
from HTMLSelect.html_components.SelectOption import SelectOption


@dataclass_json
@dataclass
class SelectListState:
    """ Serializable snapshot of a SelectList """
    name: Optional[str]
    size: int = 0
    extra_attributes: str = ""
    escape_values: bool = False
    options: List[SelectOption] = field(default_factory=list)
    selected_index: Optional[int] = None


class SelectList(HTMLComponent):
    """
    Builds the HTML for a <select> dropdown.

    Options are appended with `add_option`/`add_options`, one of them may be marked as selected,
    and `render` produces the markup. `name`, `size` and `extra_attributes` can be reassigned
    freely between renders.

    Not thread-safe: share an instance between threads only behind a lock.

    Example:
        colours = SelectList("myList2", 0, 'style="font-size:24px"')
        colours.add_option("Red", "Color1")
        colours.add_option("Blue", "Color2", True)
        colours.render()
    """

    def __init__(self, name: Optional[str] = None, size: int = 0, extra_attributes: str = "", *,
                 escape_values: bool = False):
        """
        Parameters:
            name: the name attribute of the select (None renders an empty name)
            size: number of visible rows, anything <= 0 leaves the size attribute out
            extra_attributes: additional tag information, written verbatim into the opening tag
            escape_values: whether option values are html-escaped as well as their display text
        """
        self.name = name
        self.size = size
        self.extra_attributes = extra_attributes
        self.escape_values = escape_values
        self._options: List[SelectOption] = []
        self._selected_index: Optional[int] = None
        super().__init__()

    @property
    def options(self) -> Tuple[SelectOption, ...]:
        return tuple(self._options)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def selected_option(self) -> Optional[SelectOption]:
        """
        The option that will be rendered as selected, or None if there isn't one
        """
        if self._selection_in_range():
            return self._options[self._selected_index]
        return None

    def add_option(self, display: str, value: str, selected: bool = False) -> int:
        """
        Adds an item and its value to the end of the list

        Parameters:
            display (str): the text to display for the item
            value (str): the value to send on form submit
            selected (bool): whether this item becomes the selected one

        Returns:
            int: the number of items after adding (NOT the index of the new item)
        """
        self._options.append(SelectOption(display=display, value=value))
        if selected:
            self._selected_index = len(self._options) - 1
        return len(self._options)

    def add_options(self, entries: Mapping[str, str], selected: bool = False) -> int:
        """
        Adds every entry of a mapping from value to display text, in the mapping's order.

        If `selected` is set it is passed on to every item, so the last item added ends up selected.

        Returns:
            int: the number of items after adding
        """
        for value, display in entries.items():
            self.add_option(display, value, selected)
        logging.debug(f"Added {len(entries)} options to select list {self.name!r}.")
        return len(self._options)

    def item_count(self) -> int:
        return len(self._options)

    def __len__(self) -> int:
        return self.item_count()

    def select_by_value(self, value: str, ignore_case: bool = False) -> None:
        """
        Selects the first item whose value matches. Leaves the selection alone if nothing matches.
        """
        self._select_first(lambda option: option.value, value, ignore_case)

    def select_by_display(self, display: str, ignore_case: bool = False) -> None:
        """
        Selects the first item whose display text matches. Leaves the selection alone if nothing matches.
        """
        self._select_first(lambda option: option.display, display, ignore_case)

    def clear_selection(self) -> None:
        self._selected_index = None

    def _select_first(self, key, target: str, ignore_case: bool) -> None:
        needle = str(target).casefold() if ignore_case else target
        for i, option in enumerate(self._options):
            candidate = key(option)
            if ignore_case:
                candidate = str(candidate).casefold()
            if candidate == needle:
                self._selected_index = i
                return
        logging.debug(f"No option matching {target!r} in select list {self.name!r}; selection unchanged.")

    def _selection_in_range(self) -> bool:
        return self._selected_index is not None and 0 <= self._selected_index < len(self._options)

    def _representation(self) -> str:
        name = "" if self.name is None else escape(str(self.name))
        html = f'<select name="{name}"'
        if self.size > 0:
            html += f' size="{self.size}"'
        if self.extra_attributes:
            html += f" {self.extra_attributes}"
        html += ">"

        if self._selected_index is not None and not self._selection_in_range():
            logging.debug(f"Selected index {self._selected_index} is out of range for select list {self.name!r}; "
                          f"rendering without a selection.")

        for i, option in enumerate(self._options):
            value = escape(str(option.value)) if self.escape_values else option.value
            selected = SELECTED_ATTRIBUTE if i == self._selected_index else ""
            html += f'{OPTION_PREFIX}<option value="{value}"{selected}>{escape(str(option.display))}</option>'

        html += f"{CLOSING_PREFIX}</select>"
        return html

    def get_html(self) -> str:
        return self.render()

    def to_state(self) -> SelectListState:
        return SelectListState(
            name=self.name,
            size=self.size,
            extra_attributes=self.extra_attributes,
            escape_values=self.escape_values,
            options=list(self._options),
            selected_index=self._selected_index
        )

    @classmethod
    def from_state(cls, state: SelectListState) -> 'SelectList':
        select_list = cls(state.name, state.size, state.extra_attributes, escape_values=state.escape_values)
        select_list._options = list(state.options)
        select_list._selected_index = state.selected_index
        return select_list

    def to_json(self) -> str:
        return self.to_state().to_json()

    @classmethod
    def from_json(cls, dump: str) -> 'SelectList':
        """
        Rebuilds a SelectList from the output of `to_json`
        """
        return cls.from_state(SelectListState.from_json(dump))
