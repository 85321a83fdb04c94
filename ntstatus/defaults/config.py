import json
import sys
from dataclasses import dataclass
from dataclasses import field
from dataclasses import InitVar


def _platform_environment():
    return "windows" if sys.platform == "win32" else "portable"


@dataclass
class Defaults:
    """ Defaults is a class that, when instantiated, holds the settings used
        to build the default error resolver.  Parameters can be accessed and
        modified as properties of the class.

        Additional config items can be passed via a keyword argument to the
        constructor (init).  Example:

        config = Defaults(additional_config={'foo': 'bar'})

        NB: The "environment" field is a property.  Setting it resets the
            other fields to the defaults of the selected environment.
    """
    _environment: str = field(init=False, repr=False)
    translator: str = field(default="")
    messages: str = field(default="")
    additional_config: dict = field(default_factory=dict)
    default_environment: InitVar[str] = None

    """ The default configuration items of each environment.

       "windows" asks ntdll to translate status values and FormatMessage()
       for the message text.  "portable" uses the tables built into the
       package and works on every platform.

       example:
            config = Defaults()
            # read a property:
            print(config.environment)

            # override a single value
            config.messages = "table"

            # switch environments (reset all values to default for environment)
            config.environment = "portable"
    """
    default_enumeration = {
        "windows": {
            "translator": "ntdll",
            "messages": "system"
        },
        "portable": {
            "translator": "table",
            "messages": "table"
        }
    }

    """ Supported output formats of `dump()`.
    """
    dump_formats = ['json']

    def __post_init__(self, default_environment):
        """ Initializes the configuration object with defaults

        If the environment is not specified, it is "windows" when running
        on Windows and "portable" everywhere else.
        """
        self.environment = default_environment or _platform_environment()

        for k, v in self.additional_config.items():
            setattr(self, k, v)

    def dump(self, format="json"):
        """ Outputs the current state of the configuration in the format
            specified.  Only JSON is supported.
        """
        output_format = format.lower()

        if output_format not in Defaults.dump_formats:
            raise ValueError(f"Argument value for format, '{format}', is "
                             "not a valid value")

        return json.dumps({self.environment: {
            "translator": self.translator,
            "messages": self.messages
        }})

    @property
    def environment(self):
        return self._environment

    @environment.setter
    def environment(self, environment):
        """ Sets the environment property.

        Switching environments overwrites all config values with the
        defaults of the selected environment.
        """
        if environment not in Defaults.default_enumeration:
            raise ValueError(f"Argument value for environment, "
                             f"'{environment}', is not a valid value")

        self._environment = environment
        for k, v in Defaults.default_enumeration[environment].items():
            setattr(self, k, v)
