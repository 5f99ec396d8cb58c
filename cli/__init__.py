# cli/__init__.py
# ============================================================
# Command line front end for docraster (Typer + Rich).
# ============================================================
