DEFAULT_BASE_URL = "https://card-usages.vercel.app"
SUMMARY_ENDPOINT = "/api/hello2"
USAGES_ENDPOINT = "/api/usages-list"


class CardAPI:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        summary_path: str = SUMMARY_ENDPOINT,
        usages_path: str = USAGES_ENDPOINT,
    ) -> None:
        self.base_url = base_url
        self.summary_path = summary_path
        self.usages_path = usages_path
        self.headers: dict[str, str] = {"Accept": "application/json"}
