import pytest

from HTMLSelect.html_components import HTMLComponent


class Bold(HTMLComponent):
    def __init__(self, text: str):
        self.text = text

    def _representation(self) -> str:
        return f"<b>{self.text}</b>"


class TestHTMLComponent:
    def test_render_uses_representation(self):
        assert Bold("hi").render() == "<b>hi</b>"
        assert str(Bold("hi")) == "<b>hi</b>"

    def test_abstract_component_cannot_render(self):
        with pytest.raises(NotImplementedError):
            HTMLComponent().render()

    def test_missing_markup_names_component(self):
        class Blank(HTMLComponent):
            pass

        with pytest.raises(NotImplementedError, match="Blank"):
            Blank().render()
