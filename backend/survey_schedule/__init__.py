"""Survey schedule tracker: projects API, client and view models"""

__version__ = "1.0.0"
