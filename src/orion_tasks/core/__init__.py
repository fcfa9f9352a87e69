"""
Command engine.

Components:
- commands.py: parsed command variants and CommandResult
- parser.py: line -> Command
- dispatcher.py: Command -> TaskManager operation (+ save)
- errors.py, ports.py, state.py: shared types
"""
