# Application layer: host shell interface, menu tree, controller

from dia.application.controller import DiaController, FileResult
from dia.application.menu import Menu, MenuItem
from dia.application.shell import FileFilter, HostShell

__all__ = ["DiaController", "FileResult", "Menu", "MenuItem", "FileFilter", "HostShell"]
