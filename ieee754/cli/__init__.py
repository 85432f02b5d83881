# ieee754/cli/__init__.py
