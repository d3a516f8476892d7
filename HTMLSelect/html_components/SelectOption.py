from dataclasses import dataclass

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass(frozen=True)
class SelectOption:
    """ One entry of a <select> list """
    # text shown to the user, escaped when rendered
    display: str
    # text sent on form submit
    value: str
