from helpdesk.services.text_extraction import extract_emails, extract_urls


class TestExtractEmails:
    def test_finds_email_in_sentence(self):
        assert extract_emails("Hi, I'm bob@example.com") == ["bob@example.com"]

    def test_keeps_order_of_appearance(self):
        text = "write to a.b+tag@mail.example.org or to c@d.io."
        assert extract_emails(text) == ["a.b+tag@mail.example.org", "c@d.io"]

    def test_returns_none_without_email(self):
        assert extract_emails("no contact here @ all") is None

    def test_empty_text(self):
        assert extract_emails("") is None


class TestExtractUrls:
    def test_finds_url(self):
        assert extract_urls("Book at https://portal.test/p/1/appointment/2") == [
            "https://portal.test/p/1/appointment/2"
        ]

    def test_strips_trailing_punctuation(self):
        assert extract_urls("Go to http://example.com/pay.") == ["http://example.com/pay"]

    def test_multiple_urls_first_match_first(self):
        urls = extract_urls("a https://one.test then https://two.test")
        assert urls[0] == "https://one.test"
        assert len(urls) == 2

    def test_returns_none_without_url(self):
        assert extract_urls("nothing to click here") is None
