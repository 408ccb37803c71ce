"""
Application Layer for the Locked API.

This package contains:
- ports/: Abstract interfaces (stores and external collaborators)
- use_cases/: Workflows spanning several stores (feed, publishing)
- result.py / exceptions.py: Outcome type and error taxonomy
"""
