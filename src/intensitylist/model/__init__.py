"""
The MODEL layer contains pure data structures and business logic.
It never configures logging and only touches matplotlib on demand.
It deals with breakpoints, range updates and their results.
"""
