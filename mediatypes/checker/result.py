import logging
from colorama import Fore, Style

log = logging.getLogger(__name__)


class Result:
    PASS = True
    FAIL = False
    success = PASS

    def start(self, subject):
        self.success = self.PASS

    def end(self):
        pass

    def warn(self, message):
        raise NotImplementedError()   # pragma: no cover

    def fail(self, message):
        raise NotImplementedError()   # pragma: no cover


class CaptureResult(Result):
    """Print one PASSED/FAILED line per check, followed by the log records captured during it.

    The instance installs itself as the only handler of the ``mediatypes`` logger, so `level`
    decides which records are shown.
    """
    def __init__(self, *, level=logging.WARNING):
        self.messages = []
        self.level = level

    def start(self, subject):
        super().start(subject)
        log = logging.getLogger('mediatypes')
        log.handlers = [self]
        log.setLevel(logging.DEBUG)
        self.messages[:] = []
        print(f'{Style.BRIGHT}Checking{Style.NORMAL} {subject!r} ... ', end='')

    def end(self):
        if self.success:
            print(Fore.GREEN + 'PASSED')
        else:
            print(Fore.RED + 'FAILED')
        if self.messages:
            print((Fore.RESET + '\n').join(self.messages))

    def warn(self, message):
        log.warning(message)

    def fail(self, message):
        self.success = self.FAIL
        log.error(message)
        return not message

    def handle(self, record):
        color = ''
        if record.levelno >= logging.ERROR:
            color = Fore.RED
        elif record.levelno >= logging.WARNING:
            color = Fore.YELLOW
        self.messages.append(' ' + color + record.getMessage())
