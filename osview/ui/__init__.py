"""curses screens for osview."""
