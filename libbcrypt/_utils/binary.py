BCRYPT_B64_CHARS = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
DIGIT_CHARS = "0123456789"

# membership lookups for the validator, ascii only
bcrypt64_charset = frozenset(BCRYPT_B64_CHARS)
digit_charset = frozenset(DIGIT_CHARS)
