VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argmap"
DESCRIPTION = "A schema-less command-line flag parser with multi-valued lookups"
LOG_FILE_ENV = "ARGMAP_LOG_FILE"
