"""Infrastructure layer — dataset files and the coordination index.

This layer reads and writes JSON on disk and builds domain models from it.
It must never import from services, commands, or output.
"""
