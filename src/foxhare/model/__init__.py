"""
The MODEL layer contains pure data structures and persistence.
It has NO knowledge of the menu or the text charts.
It deals with Parameters, Population Series, and I/O.
"""
