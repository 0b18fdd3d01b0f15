# Recording stand-ins for the result index and the visibility tracker.

class FakeIndex:
    def __init__(self, calls):
        self.calls = calls

    def add_item(self, item_type, preferred_position, container_index):
        self.calls.append((item_type, preferred_position, container_index))


class FakeTracker:
    def __init__(self):
        self.out_of_screen = []

    def banner_is_out_of_screen(self, banner):
        self.out_of_screen.append(banner)


class FakeScreenTracker(FakeTracker):
    def __init__(self):
        super().__init__()
        self.on_screen = []

    def banner_is_on_screen(self, banner):
        self.on_screen.append(banner)
