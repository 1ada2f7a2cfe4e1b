APP_ORG = "QuickTools"
APP_NAME = "PyWordPad"

DEFAULT_DOCUMENT_HTML = (
    "<html><body style='font-family: Arial, sans-serif; font-size: 14px;'>"
    "<p>Start typing...</p></body></html>"
)

DEFAULT_FILENAME = "document.doc"
DOCUMENT_SUFFIXES = (".doc", ".html")

OPEN_FILTER = "Documents (*.doc *.html *.htm);;All files (*)"
SAVE_FILTER = "DOC/HTML files (*.doc *.html)"

HEADING_FRAGMENT = "<h1>Heading</h1>"
LINK_STYLE = "color: blue; text-decoration: underline;"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"
