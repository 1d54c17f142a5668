"""
Components package: leaf units that talk to the outside world.
"""
