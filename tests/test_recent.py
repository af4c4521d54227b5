from services.recent import MAX_RECENT, RecentSearchStore


class TestRecentSearchStore:

    def test_most_recent_first_without_duplicates(self):
        store = RecentSearchStore()
        store.add("KORD")
        store.add("KJFK")
        assert store.add("KORD") == ["KORD", "KJFK"]

    def test_capped(self):
        store = RecentSearchStore()
        for code in ["KAAA", "KBBB", "KCCC", "KDDD", "KEEE", "KFFF", "KGGG"]:
            store.add(code)
        stations = store.get()
        assert len(stations) == MAX_RECENT
        assert stations[0] == "KGGG"
        assert "KAAA" not in stations

    def test_get_returns_copy(self):
        store = RecentSearchStore()
        store.add("KORD")
        store.get().append("KJFK")
        assert store.get() == ["KORD"]
