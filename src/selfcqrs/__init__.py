"""
selfcqrs – in-process command/query dispatcher.

Import path convention::

    from selfcqrs.application.cqrs import Command, CommandHandler, Dispatcher
    from selfcqrs.kernel.errors import HandlerNotFoundError
    from selfcqrs.config.settings import DispatchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
