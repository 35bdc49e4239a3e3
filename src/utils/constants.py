"""Generator configuration constants."""

# Seeding
UINT32_MASK = 0xFFFFFFFF  # Mersenne Twister seeds are unsigned 32-bit
STRING_HASH_START = 5381  # djb2 start value used by string_hash

# Curves
DEFAULT_CURVE = "identity"

# Sequence operations
PLUCK_LIMIT_DEFAULT = 0  # pluck() considers the whole sequence
CYCLE_LIMIT_DEFAULT = 1  # pluck_cycle() never repeats the last item

# CLI
DRAW_COUNT_DEFAULT = 1
