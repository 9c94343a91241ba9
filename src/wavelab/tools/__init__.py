"""Development tools and the headless render command.

:mod:`render` drives a session from the command line and exports its plot
data; :mod:`debug` holds opt-in timing hooks used by the core.
"""
