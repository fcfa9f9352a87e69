"""
Task subsystem.

Components:
- task_models.py: task variants (Todo, Deadline, Event) and rendering
- task_manager.py: ordered collection with 1-based add/mark/delete/list/find
- task_store.py: JSON file storage (whole list per save)
"""
