"""Scoped capture and restore of global plotting configuration."""

from __future__ import annotations

from typing import Any, Dict, MutableMapping, Optional

import matplotlib as mpl

from ..utils.logging import get_logger


_logger = get_logger(__name__)


class DisplayState:
    """Snapshot of a plotting configuration mapping.

    The mapping is held by reference (``matplotlib.rcParams`` unless another
    one is given). Used as a context manager it captures the mapping on entry
    and writes the captured values back on every exit, including exits by
    exception. Keys added while inside the block are removed again. Restoring
    mirrors ``matplotlib.rc_context``: the snapshot is written back with
    ``dict.update`` so validated values skip revalidation.
    """

    def __init__(self, params: Optional[MutableMapping[str, Any]] = None):
        self.params = mpl.rcParams if params is None else params
        self._snapshot: Optional[Dict[str, Any]] = None

    def capture(self) -> Dict[str, Any]:
        # RcParams.copy() avoids per-key validation and deprecation lookups
        self._snapshot = dict(self.params.copy())
        return self._snapshot

    def restore(self) -> None:
        if self._snapshot is None:
            raise RuntimeError("DisplayState.restore() called before capture()")
        for key in [k for k in self.params if k not in self._snapshot]:
            del self.params[key]
        if isinstance(self.params, dict):
            # Bypass RcParams validation; the snapshot already holds validated values
            dict.update(self.params, self._snapshot)
        else:
            self.params.update(self._snapshot)
        _logger.debug("Restored %d display parameters", len(self._snapshot))

    def __enter__(self) -> "DisplayState":
        self.capture()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
