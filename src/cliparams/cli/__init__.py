"""Command-line tool for inspecting cliparams applications."""
