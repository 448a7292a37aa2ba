"""Command-line token bindings.

FlagBinder maps command-line tokens to the (section, key) they set:

- long flags: "--section-key"
- short flags: "-c"
- positional indices: "0", "1", ...

A token addresses at most one parameter. A parameter has at most one token
of each category; binding a new one replaces the old token.
"""

from typing import Dict, Optional, Tuple
import logging

from .constants import LONG_FLAG_PREFIX, SHORT_FLAG_PREFIX

logger = logging.getLogger(__name__)

LONG = "long"
SHORT = "short"
INDEX = "index"

Address = Tuple[str, str]


class FlagBinder:
    """Token -> (section, key) lookup table used by the command-line parser."""

    def __init__(self):
        self._targets: Dict[str, Address] = {}
        self._tokens: Dict[Address, Dict[str, str]] = {}

    def bind_long(self, name: str, section: str, key: str) -> str:
        """Bind ``--name`` to (section, key).

        Args:
            name: Flag name with or without the leading "--"

        Returns:
            The bound token

        Raises:
            ValueError: If the name is empty
        """
        name = name[len(LONG_FLAG_PREFIX):] if name.startswith(LONG_FLAG_PREFIX) else name
        if not name:
            raise ValueError(f"Long flag for {section}/{key} cannot be empty")
        return self._bind(LONG_FLAG_PREFIX + name, LONG, (section, key))

    def bind_short(self, flag: str, section: str, key: str) -> str:
        """Bind ``-c`` to (section, key).

        Raises:
            ValueError: If ``flag`` is not a single character
        """
        flag = flag[len(SHORT_FLAG_PREFIX):] if flag.startswith(SHORT_FLAG_PREFIX) and len(flag) > 1 else flag
        if len(flag) != 1 or flag == SHORT_FLAG_PREFIX:
            raise ValueError(f"Short flag for {section}/{key} must be a single character, got '{flag}'")
        return self._bind(SHORT_FLAG_PREFIX + flag, SHORT, (section, key))

    def bind_index(self, index: int, section: str, key: str) -> str:
        """Bind positional argument number ``index`` to (section, key).

        Raises:
            ValueError: If ``index`` is negative or not an integer
        """
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise ValueError(f"Positional index for {section}/{key} must be a non-negative integer, got {index!r}")
        return self._bind(str(index), INDEX, (section, key))

    def _bind(self, token: str, category: str, address: Address) -> str:
        # A token moves if it was bound elsewhere
        self.unbind(token)
        slots = self._tokens.setdefault(address, {})
        previous = slots.get(category)
        if previous is not None:
            del self._targets[previous]
        slots[category] = token
        self._targets[token] = address
        logger.debug(f"Bound {token} -> {address[0]}/{address[1]}")
        return token

    def unbind(self, token: str) -> bool:
        """Remove ``token``. Returns True if it was bound."""
        address = self._targets.pop(token, None)
        if address is None:
            return False
        slots = self._tokens[address]
        for category, bound in list(slots.items()):
            if bound == token:
                del slots[category]
        if not slots:
            del self._tokens[address]
        return True

    def resolve(self, token: str) -> Optional[Address]:
        """Return the (section, key) bound to ``token``, or None."""
        return self._targets.get(token)

    def bindings_for(self, section: str, key: str) -> Dict[str, str]:
        """Tokens bound to (section, key), by category ("long", "short", "index")."""
        return dict(self._tokens.get((section, key), {}))

    def __contains__(self, token: str) -> bool:
        return token in self._targets

    def __len__(self) -> int:
        return len(self._targets)
