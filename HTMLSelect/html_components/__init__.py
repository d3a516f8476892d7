from HTMLSelect.html_components.HTMLComponent import HTMLComponent
