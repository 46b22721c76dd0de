'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

from core.log import Log
from core.sample_tree import build_sample_forest
from ui.drag_config import DragConfig
from ui.tree_view import TreeDragView


class MainFrame(wx.Frame):
    """Main application frame: one drag-and-drop tree view plus a status bar."""
    def __init__(self, verbosity: int = 0, config: DragConfig = None, seed: int = None):
        super().__init__(None, title="TreeDrop", size=(520, 640))
        self.SetMinSize((320, 300))

        Log.set_verbosity(verbosity)
        self.config = config or DragConfig()

        self.CreateStatusBar()
        self.SetStatusText("Drag rows to reorder. Hover a collapsed row to open it.")

        self._build_menu()

        root = build_sample_forest(seed=seed)
        self.view = TreeDragView(self, root, config=self.config)

        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(self.view, 1, wx.EXPAND)
        self.SetSizer(sizer)

        Log.debug(
            f"MainFrame ready (divisions={self.config.divisions}, "
            f"expand_delay={self.config.expand_delay_ms}ms, read_only={self.config.read_only}).", 1
        )

    def _build_menu(self):
        menubar = wx.MenuBar()
        file_menu = wx.Menu()
        file_menu.Append(wx.ID_EXIT, "E&xit\tCtrl+Q")
        menubar.Append(file_menu, "&File")
        self.SetMenuBar(menubar)
        self.Bind(wx.EVT_MENU, lambda _evt: self.Close(), id=wx.ID_EXIT)
