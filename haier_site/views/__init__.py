"""HTML rendering for site pages.

Templates are loaded by the TemplateStore and composed by the PageRenderer:
the page body is rendered first and embedded into the shared layout.
"""
