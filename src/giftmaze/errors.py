class InvalidDimensions(ValueError):
    def __init__(self, height, width):
        super().__init__(f"maze dimensions must be positive integers, got {height}x{width}")
        self.height = height
        self.width = width


class NoOpenCells(RuntimeError):
    pass


class NotEnoughOpenCells(NoOpenCells):
    pass


class RetryLimitExceeded(RuntimeError):
    def __init__(self, passes: int):
        super().__init__(f"no open cell accepted after {passes} passes")
        self.passes = passes
