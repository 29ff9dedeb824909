"""
Pure rules of the learning engine, free of FastAPI and SQLAlchemy.

- curriculum: areas, sections, modules and the tenant visibility resolver
- access: learner billing state and the access gate
- progression: section progress, the unlock state machine and answer grading
"""
