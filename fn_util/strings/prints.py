import os
import re

from fn_util.cfg import Config
from fn_util.exceptions import InvalidArgumentError

# ----------------------------------------------------------------------------------------------------------------------
#                                                    ANSI Structs
# ----------------------------------------------------------------------------------------------------------------------
_ANSI_COLORS = dict(
    list(zip([
        'grey',
        'red',
        'green',
        'yellow',
        'blue',
        'purple',
        'cyan',
        'white',
    ],
        list(range(30, 38))
    ))
)

_ANSI_COLORS_RE = '\033\\[(?:%s)m' % '|'.join(['%d' % v for v in _ANSI_COLORS.values()])
_ANSI_RESET = '\033[0m'
_ANSI_RESET_RE = '\033\\[0m'


# ----------------------------------------------------------------------------------------------------------------------
#                                                   String Manips
# ----------------------------------------------------------------------------------------------------------------------
def padding(text, total_length=None, padding_char=None):
    """
    Centers text in a field of total_length characters: pads on the left up to (total_length + len(text)) // 2,
    then on the right up to total_length. The odd fill character lands on the right:
        padding('ab', 7, '*') -> '**ab***'
    Text longer than total_length is returned as is.
    """
    total_length = Config.padding.TOTAL_LENGTH if total_length is None else total_length
    padding_char = Config.padding.CHAR if padding_char is None else padding_char
    if not isinstance(padding_char, str) or len(padding_char) != 1:
        raise InvalidArgumentError(f'padding_char must be a single character, got {padding_char!r}',
                                   source='fn_util.strings.prints.padding')
    return text.rjust((total_length + len(text)) // 2, padding_char).ljust(total_length, padding_char)


def title_case(text):
    """First character upper case, all the rest lower case: 'hELLO wORLD' -> 'Hello world'"""
    return text[:1].upper() + text[1:].lower()


def title(s):
    """
    Replaces underscores and hyphens with a space and then
    capitalizes the first letter in each word
    """
    s = s.replace('_', ' ')
    s = s.replace('-', ' ')
    s = s.title()
    return s


# ----------------------------------------------------------------------------------------------------------------------
#                                                   Pretty Prints
# ----------------------------------------------------------------------------------------------------------------------
def colored(text, color=None):
    """Colorize text, while stripping nested ANSI color sequences.
    Available text colors:
        grey, red, green, yellow, blue, purple, cyan, white.
    Setting the ANSI_COLORS_DISABLED environment variable returns the text untouched.
    """
    if os.getenv('ANSI_COLORS_DISABLED') is not None or color is None:
        return text
    text = re.sub(_ANSI_COLORS_RE + '(.*?)' + _ANSI_RESET_RE, r'\1', text)
    return '\033[%dm%s' % (_ANSI_COLORS[color], text) + _ANSI_RESET


def cprint(text, color=None, **kwargs):
    """Print colorize text.
    It accepts arguments of print function.
    """
    print(colored(text, color), **kwargs)


def banner_str(text, sep='=', length=150):
    if text is None:
        spaced_text = ''
    else:
        text = str(text)
        spaced_text = text if len(text) + 2 >= length else f' {text} '
    return padding(spaced_text, length, sep)


def banner(text=None, color=None, sep='=', length=150):
    cprint(banner_str(text=text, sep=sep, length=length), color=color)
