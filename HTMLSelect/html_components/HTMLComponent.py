class HTMLComponent:
    def render(self) -> str:
        """
        Returns the bare markup of this component, without any wrapping element
        """
        return self._representation()

    def _representation(self) -> str:
        """
        Builds the markup for this component; subclasses must override it
        """
        raise NotImplementedError(f"{type(self).__name__} does not define its markup")

    def __str__(self) -> str:
        return self.render()
