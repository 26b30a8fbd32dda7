class SortingMachineError(Exception):
    pass


class IllegalStateError(SortingMachineError, RuntimeError):
    """
    Operation not permitted in the current mode.
    """

    def __init__(self, operation: str, mode: object):
        self.operation = operation
        self.mode = mode
        super().__init__(f"{operation} not permitted in {mode}")


class EmptyContainerError(SortingMachineError, IndexError):
    pass
