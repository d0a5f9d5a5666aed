import json


FALSE_SPELLINGS = ('0', 'false', 'no', 'off')
TRUE_SPELLINGS = ('1', 'true', 'yes', 'on')


class Config:
    def __init__(self):
        self.definitions = {}  # Named conditions usable as IF arguments
        self.booleans = {}
        for text in FALSE_SPELLINGS:
            self.booleans[text] = False
        for text in TRUE_SPELLINGS:
            self.booleans[text] = True
        self.unknown_is_true = True  # anything not explicitly false is true
        self.strict = False

    def parse_defines(self, define_str):
        """Parses a string like 'DEBUG=1,RELEASE=false,FEATURE' into the definitions dict."""
        if not define_str:
            return

        pairs = define_str.split(',')
        for pair in pairs:
            if not pair.strip():
                continue
            if '=' in pair:
                key, value = pair.split('=', 1)
                self.definitions[key.strip().upper()] = self.resolve(value.strip())
            else:
                # Assume True if no value provided
                self.definitions[pair.strip().upper()] = True

    def load_file(self, filepath):
        """Loads a JSON config file and merges it.

        Recognised keys: "definitions" (mapping), "booleans" (mapping of
        spelling to bool), "unknown_is_true" and "strict".
        """
        with open(filepath, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")
        for section in ("booleans", "definitions"):
            if section in data and not isinstance(data[section], dict):
                raise ValueError(f"\"{section}\" must be a JSON object")

        if "booleans" in data:
            # Spellings added here are read against the table as it was before the merge
            spellings = {text.lower(): self.to_bool(value)
                         for text, value in data["booleans"].items()}
            self.booleans.update(spellings)

        if "definitions" in data:
            for name, value in data["definitions"].items():
                if isinstance(value, str):
                    value = self.resolve(value)
                self.definitions[name.upper()] = bool(value)

        if "unknown_is_true" in data:
            self.unknown_is_true = self.to_bool(data["unknown_is_true"])
        if "strict" in data:
            self.strict = self.to_bool(data["strict"])

    def to_bool(self, value):
        """Converts a config value, reading strings through the spelling table."""
        if isinstance(value, str):
            key = value.strip().lower()
            if key not in self.booleans:
                raise ValueError(f"not a boolean: {value!r}")
            return self.booleans[key]
        if not isinstance(value, (bool, int)):
            raise ValueError(f"not a boolean: {value!r}")
        return bool(value)

    def resolve(self, token):
        """Maps an IF argument to a boolean."""
        key = token.lower()
        if key in self.booleans:
            return self.booleans[key]
        if token.upper() in self.definitions:
            return bool(self.definitions[token.upper()])
        return self.unknown_is_true
