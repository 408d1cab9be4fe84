#!/usr/bin/env python
"""Desktop app entrypoint for CivicFolio."""

import flet as ft

from civicfolio.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
