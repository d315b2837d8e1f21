"""Key bindings for the interactive history search, in bound and serializable forms."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Iterable


@dataclass(frozen=True)
class Binding:
    """A set of keys that trigger one action, with the text shown in the help bar."""

    keys: tuple[str, ...] = ()
    help_key: str = ""
    help_desc: str = ""

    @classmethod
    def of(cls, keys: Iterable[str], help_key: str, help_desc: str) -> Binding:
        return cls(tuple(keys), help_key, help_desc)

    def matches(self, key: str) -> bool:
        """Whether the pressed ``key`` triggers this binding."""
        return key in self.keys


_HELP_DESCRIPTIONS: dict[str, str] = {
    "up": "scroll up ",
    "down": "scroll down ",
    "page_up": "page up ",
    "page_down": "page down ",
    "select_entry": "select an entry ",
    "select_entry_and_change_dir": "select an entry and cd into that directory",
    "left": "move left ",
    "right": "move right ",
    "table_left": "scroll the table left ",
    "table_right": "scroll the table right ",
    "delete_entry": "delete the highlighted entry ",
    "help": "help ",
    "quit": "exit hiSHtory ",
    "jump_start_of_input": "jump to the start of the input ",
    "jump_end_of_input": "jump to the end of the input ",
    "word_left": "jump left one word ",
    "word_right": "jump right one word ",
}

_SUBSTITUTIONS = (
    ("+left", "+← "),
    ("+right", "+→ "),
    ("+down", "+↓ "),
    ("+up", "+↑ "),
    ("pgdown", "pgdn"),
)

_SINGLE_KEYS = {"up": "↑ ", "down": "↓ ", "left": "←", "right": "→"}


def prettify_key_binding(kb: str) -> str:
    """Render a key name the way it is shown in the help bar."""
    if kb in _SINGLE_KEYS:
        return _SINGLE_KEYS[kb]
    for old, new in _SUBSTITUTIONS:
        kb = kb.replace(old, new)
    return kb


@dataclass(frozen=True)
class KeyMap:
    up: Binding
    down: Binding
    page_up: Binding
    page_down: Binding
    select_entry: Binding
    select_entry_and_change_dir: Binding
    left: Binding
    right: Binding
    table_left: Binding
    table_right: Binding
    delete_entry: Binding
    help: Binding
    quit: Binding
    jump_start_of_input: Binding
    jump_end_of_input: Binding
    word_left: Binding
    word_right: Binding

    def to_serializable(self) -> SerializableKeyMap:
        return SerializableKeyMap(
            **{f.name: list(getattr(self, f.name).keys) for f in fields(self)}
        )

    def short_help(self) -> list[Binding]:
        return [_TITLE_BINDING, self.help]

    def full_help(self) -> list[list[Binding]]:
        return [
            [_TITLE_BINDING, self.up, self.left, self.select_entry, self.select_entry_and_change_dir],
            [_EMPTY_BINDING, self.down, self.right, self.delete_entry],
            [_EMPTY_BINDING, self.page_up, self.table_left, self.quit],
            [_EMPTY_BINDING, self.page_down, self.table_right, self.help],
        ]


@dataclass
class SerializableKeyMap:
    """The key names for each action, as stored in the config file."""

    up: list[str] = field(default_factory=list)
    down: list[str] = field(default_factory=list)
    page_up: list[str] = field(default_factory=list)
    page_down: list[str] = field(default_factory=list)
    select_entry: list[str] = field(default_factory=list)
    select_entry_and_change_dir: list[str] = field(default_factory=list)
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)
    table_left: list[str] = field(default_factory=list)
    table_right: list[str] = field(default_factory=list)
    delete_entry: list[str] = field(default_factory=list)
    help: list[str] = field(default_factory=list)
    quit: list[str] = field(default_factory=list)
    jump_start_of_input: list[str] = field(default_factory=list)
    jump_end_of_input: list[str] = field(default_factory=list)
    word_left: list[str] = field(default_factory=list)
    word_right: list[str] = field(default_factory=list)

    def to_key_map(self) -> KeyMap:
        """Build bindings; every action must have at least one key."""
        bindings: dict[str, Binding] = {}
        for f in fields(self):
            keys = getattr(self, f.name)
            if not keys:
                raise ValueError(f"no keys configured for {f.name!r} in {self!r}")
            bindings[f.name] = Binding.of(
                keys, prettify_key_binding(keys[0]), _HELP_DESCRIPTIONS[f.name]
            )
        return KeyMap(**bindings)

    def with_defaults(self) -> SerializableKeyMap:
        """Return a copy with every empty action filled from the default key map."""
        return replace(
            self,
            **{
                f.name: list(getattr(DEFAULT_KEY_MAP, f.name).keys)
                for f in fields(self)
                if not getattr(self, f.name)
            },
        )


_TITLE_BINDING = Binding.of([""], "hiSHtory: Search your shell history", "")
_EMPTY_BINDING = Binding.of([""], "", "")

DEFAULT_KEY_MAP = KeyMap(
    up=Binding.of(["up", "alt+OA", "ctrl+p"], "↑ ", "scroll up "),
    down=Binding.of(["down", "alt+OB", "ctrl+n"], "↓ ", "scroll down "),
    page_up=Binding.of(["pgup"], "pgup", "page up "),
    page_down=Binding.of(["pgdown"], "pgdn", "page down "),
    select_entry=Binding.of(["enter"], "enter", "select an entry "),
    select_entry_and_change_dir=Binding.of(
        ["ctrl+x"], "ctrl+x", "select an entry and cd into that directory"
    ),
    left=Binding.of(["left"], "← ", "move left "),
    right=Binding.of(["right"], "→ ", "move right "),
    table_left=Binding.of(["shift+left"], "shift+← ", "scroll the table left "),
    table_right=Binding.of(["shift+right"], "shift+→ ", "scroll the table right "),
    delete_entry=Binding.of(["ctrl+k"], "ctrl+k", "delete the highlighted entry "),
    help=Binding.of(["ctrl+h"], "ctrl+h", "help "),
    quit=Binding.of(["esc", "ctrl+c", "ctrl+d"], "esc", "exit hiSHtory "),
    jump_start_of_input=Binding.of(["ctrl+a"], "ctrl+a", "jump to the start of the input "),
    jump_end_of_input=Binding.of(["ctrl+e"], "ctrl+e", "jump to the end of the input "),
    word_left=Binding.of(["ctrl+left"], "ctrl+left", "jump left one word "),
    word_right=Binding.of(["ctrl+right"], "ctrl+right", "jump right one word "),
)