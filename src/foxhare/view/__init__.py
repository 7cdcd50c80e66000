"""
The VIEW layer: text charts and the interactive menu.
"""
