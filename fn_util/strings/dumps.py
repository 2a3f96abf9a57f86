import json
import sys

import numpy as np

from fn_util.cfg import Config
from fn_util.func import reflect


# ----------------------------------------------------------------------------------------------------------------------
#                                                      Encoding
# ----------------------------------------------------------------------------------------------------------------------
def _to_jsonable(obj):
    # json.dumps fallback - called only for objects json cannot encode natively
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    return reflect(obj)


def json_str(obj):
    """
    Serialize obj to indented JSON. Non ASCII characters are kept as is, numpy arrays and scalars become lists and
    Python scalars, and any other object is projected onto its public attributes (see func.reflect).
    """
    return json.dumps(obj, indent=Config.json.INDENT, ensure_ascii=Config.json.ENSURE_ASCII, default=_to_jsonable)


def write_json(obj, file=None):
    print(json_str(obj), file=sys.stdout if file is None else file)
