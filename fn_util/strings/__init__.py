from fn_util.strings.prints import padding, title_case, title, colored, cprint, banner_str, banner
from fn_util.strings.dumps import json_str, write_json
from fn_util.strings.logs import LogColorer, set_logging_to_stdout, loggable
