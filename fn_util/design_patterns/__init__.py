from fn_util.design_patterns.deconstruct import Deconstructable, Deconstructs, deconstruct
from fn_util.design_patterns.singleton import Singleton
