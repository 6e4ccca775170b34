"""
Terminal-facing services: the terminal host, the drawing layer and the UI strings.
"""
