"""
Notification subsystem.

Components:
- tones.py: generated beep/chime/pulse waveforms
- toasts.py: in-app toast queue and flash indicator
- host.py: desktop audio + OS notifications (optional deps)
- dispatcher.py: one notify() call across all channels
"""
