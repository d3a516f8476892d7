# markup placed before each <option> line and before the closing tag
OPTION_PREFIX = "\n\t"
CLOSING_PREFIX = "\n"

# attribute written on the option that matches the selected index
SELECTED_ATTRIBUTE = ' selected="selected"'
