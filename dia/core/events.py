"""Event names emitted from the shell to the frontend."""

FILE_NEW = "file:new"
FILE_OPEN_REQUEST = "file:open-request"
FILE_SAVE = "file:save"
FILE_SAVE_AS = "file:save-as"
FILE_OPENED = "file:opened"          # payload: FileResult.to_dict()
SETTINGS_OPEN = "settings:open"
ABOUT_OPEN = "about:open"
THEME_SET = "theme:set"              # payload: theme id
SAVE_AND_QUIT = "app:save-and-quit"

FRONTEND_EVENTS = (
    FILE_NEW,
    FILE_OPEN_REQUEST,
    FILE_SAVE,
    FILE_SAVE_AS,
    FILE_OPENED,
    SETTINGS_OPEN,
    ABOUT_OPEN,
    THEME_SET,
    SAVE_AND_QUIT,
)
