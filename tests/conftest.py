import os

# The NiceGUI page registers process-wide routes; API tests build bare apps.
os.environ["UI_ENABLED"] = "false"
