from fn_util.func import is_function


# ----------------------------------------------------------------------------------------------------------------------
#
# ----------------------------------------------------------------------------------------------------------------------
class Singleton:
    """
    Configuration container: defaults live as class attributes, instances may override them via kwargs.
    Attributes holding another Singleton form a nested configuration tree.
    """

    def __init__(self, **kwargs):  # Only allow init via kwargs
        self.__dict__.update(**kwargs)

    @classmethod
    def _public_members(cls):
        # Walk the MRO so subclassed configs keep their parents' defaults
        members = {}
        for klass in reversed(cls.__mro__):
            if klass is object or klass is Singleton:
                continue
            for k, v in klass.__dict__.items():
                if not k.startswith('_') and not is_function(v) and not isinstance(v, property):
                    members[k] = v
        return members

    @classmethod
    def assimilate(cls, name_dict):
        """
        Similar to the constructor, only allows handling of nested singletons: each nested Singleton picks the
        names it knows from name_dict.
        """
        members = cls._public_members()
        new_cfg = cls(**{k: v for k, v in name_dict.items() if k in members and not isinstance(members[k], Singleton)})
        for k, v in members.items():
            if isinstance(v, Singleton):
                new_cfg.__dict__[k] = v.assimilate(name_dict)
        return new_cfg

    def _value(self, k, default):
        return self.__dict__.get(k, default)

    def __str__(self, indent_level=1):
        rep = f"{self.__class__.__name__}:\n"
        mems = []
        padding = '\t' * indent_level
        for k, v in self._public_members().items():
            v = self._value(k, v)
            if isinstance(v, Singleton):
                mems.append(f'{padding}{k} : {v.__str__(indent_level=indent_level + 1)}')
            else:
                mems.append(f'{padding}{k} : {v}')
        rep += "\n".join(mems)
        return rep

    def as_dict(self):
        """
        Returns
        -------
        representation : dict
            The singleton representation as a nested dictionary
        """
        d = {}
        for k, v in self._public_members().items():
            v = self._value(k, v)
            d[k] = v.as_dict() if isinstance(v, Singleton) else v
        return d
