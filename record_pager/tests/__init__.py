import os
import tempfile

from simple_logger import Slogger

# Keep test runs from writing into the working directory's logs/.
Slogger.configure(log_path=os.path.join(tempfile.gettempdir(), "record_pager_tests.log"), level="DEBUG")
