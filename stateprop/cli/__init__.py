"""
stateprop CLI - Stateful Property Runner

Commands:
- stateprop run MODULE:ATTR - Run a stateful property (reproducible with --seed)
- stateprop version - Show version information
"""
