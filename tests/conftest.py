import os

# Widgets are created headless in CI and on machines without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
