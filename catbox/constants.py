KIB = 1024
MIB = KIB * KIB
GIB = MIB * KIB

CATBOX_API_URL = "https://catbox.moe/user/api.php"
LITTERBOX_API_URL = "https://litterbox.catbox.moe/resources/internals/api.php"

MAX_CATBOX_FILE_SIZE = 200 * MIB
MAX_LITTERBOX_FILE_SIZE = 1 * GIB
MAX_ALBUM_FILES = 500

PRECONDITION_FAILED = 412
NO_SUCH_FILE_ERROR = "File doesn't exist?"
NO_SUCH_ALBUM_ERROR = "No album found for user specified."

DEFAULT_TIMEOUT = 30
USERHASH_ENV = "CATBOX_USERHASH"
TIMEOUT_ENV = "CATBOX_TIMEOUT"
