"""Focus/break timer state machine and its one-second ticker."""
