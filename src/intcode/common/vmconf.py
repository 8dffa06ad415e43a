OPCODE_BASE      = 100                  # word % OPCODE_BASE -> opcode, word // OPCODE_BASE -> modes
MODE_SLOTS       = 3                    # Modes encoded in a single word

PROGRAM_FILE     = 'input.txt'          # Default program/data file

LAYER_WIDTH      = 25
LAYER_HEIGHT     = 6

SERIAL_PHASES    = (0, 1, 2, 3, 4)
FEEDBACK_PHASES  = (5, 6, 7, 8, 9)
INITIAL_SIGNAL   = 0
