# ui/timers.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Callable

import wx

__all__ = ["WxScheduler"]


class _OneShot:
    """Cancellable wrapper around wx.CallLater."""

    def __init__(self, delay_ms: int, fn: Callable[[], None]):
        self._call = wx.CallLater(max(1, int(delay_ms)), fn)

    @property
    def active(self) -> bool:
        return self._call.IsRunning()

    def cancel(self) -> None:
        if self._call.IsRunning():
            self._call.Stop()


class _Repeating(wx.Timer):
    """wx.Timer that calls `fn` on every tick until cancelled."""

    def __init__(self, interval_ms: int, fn: Callable[[], None]):
        super().__init__()
        self._fn = fn
        self.Start(max(1, int(interval_ms)))

    def Notify(self):
        self._fn()

    @property
    def active(self) -> bool:
        return self.IsRunning()

    def cancel(self) -> None:
        if self.IsRunning():
            self.Stop()


class WxScheduler:
    """Scheduler for the wx main loop; callbacks run on the GUI thread."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> _OneShot:
        return _OneShot(delay_ms, fn)

    def call_every(self, interval_ms: int, fn: Callable[[], None]) -> _Repeating:
        return _Repeating(interval_ms, fn)
