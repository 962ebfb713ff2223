"""
Application Layer for the Training Coach API.

This package contains:
- ports/: Abstract interfaces (plan catalog, session store)
- session/: Session engine, timer scheduling and the live-session registry
- use_cases/: Entry points that orchestrate ports and the session engine
"""
