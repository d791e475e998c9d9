"""Application-wide constants."""

APP_NAME = "ChapterEditor"
APP_VERSION = "0.1.0"
ORG_NAME = "ChapterEditor"
ORG_DOMAIN = "chapteredit.org"

# Main window defaults
DEFAULT_WINDOW_WIDTH = 640
DEFAULT_WINDOW_HEIGHT = 800

# Name of the chapter field holding the list of content groups
CONTENT_FIELD_NAME = "content"

# Header arrows for collapsible groups
ARROW_EXPANDED = "▾"
ARROW_COLLAPSED = "▸"

# Accessible descriptions mirroring the expansion state
ACCESSIBLE_EXPANDED = "expanded"
ACCESSIBLE_COLLAPSED = "collapsed"

# Content list labels
CHAPTER_TITLE = "Chapter"
CONTENT_ITEM_TITLE = "Content"
ADD_CONTENT_TEXT = "Add content"
