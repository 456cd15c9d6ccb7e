class BlockError(Exception):
    """Bazowy wyjątek dla bloków i fabryki bloków."""


class InvalidBlockConfigError(BlockError, ValueError):
    """
    Render nie ma zadeklarowanej klasy w konfiguracji bloku.
    To błąd konfiguracji testu — nie ponawiać, trzeba poprawić config.
    """

    def __init__(self, render_name: str, class_name=None):
        self.render_name = render_name
        self.class_name = class_name
        super().__init__(
            f'There is no such render "{render_name}" declared for the block "{class_name}"'
        )


class UnknownBlockClassError(BlockError, KeyError):
    """Fabryka nie zna klasy o podanej nazwie."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(class_name)

    def __str__(self):
        return f'Block class "{self.class_name}" is not registered in BlockFactory'
