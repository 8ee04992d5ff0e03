class ContextLock:
    """Simple on/off context manager to handle locking mechanisms.

    Entering an already active lock raises a `RuntimeError`
    with message `error_message`.
    """

    def __init__(self, error_message: str = "Context is already active"):
        self.__message = error_message
        self.__active = False

    def __enter__(self):
        if self.__active:
            raise RuntimeError(self.__message)
        self.__active = True

    def __exit__(self, *args, **kwargs):
        self.__active = False

    @property
    def is_active(self) -> bool:
        """bool: Is context activated?"""
        return self.__active
