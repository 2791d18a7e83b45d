"""
Terminal UI for the record manager.

A Textual-based front end over a JSON record store, driven by a background
event source that emits key presses and periodic ticks.

Usage:
    python -m carbook.tui.app --db data/db.json

Components:
    - CarBookApp: Main application class
    - MainScreen: Menu bar, active panel and footer
    - ViewController: Tab, cursor and store state machine
    - EventSource: Background Input/Tick producer
    - SelectionCursor: Wrapping index into the record list
"""
