"""
CLI Commands

Click command implementations registered by ``puzzlebreak.main``.
"""
