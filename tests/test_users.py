"""Tests for customer registration."""


class TestRegisterUser:
    def test_first_registration_creates_customer(self, client):
        response = client.post("/users/a@x.com", json={"name": "Ada", "image": "ada.png"})

        assert response.status_code == 200
        user = response.json()
        assert user["email"] == "a@x.com"
        assert user["name"] == "Ada"
        assert user["role"] == "customer"
        assert user["created_at"]

    def test_repeat_registration_returns_identical_record(self, client):
        first = client.post("/users/a@x.com", json={"name": "Ada"}).json()
        second = client.post("/users/a@x.com", json={"name": "Ada"}).json()

        assert first == second

    def test_repeat_registration_never_overwrites(self, client):
        first = client.post("/users/a@x.com", json={"name": "Ada", "image": "ada.png"}).json()
        second = client.post("/users/a@x.com", json={"name": "Someone Else", "image": "other.png"}).json()

        assert second == first
        assert second["name"] == "Ada"

    def test_path_email_wins_over_body(self, client):
        response = client.post("/users/a@x.com", json={"email": "b@x.com", "name": "Ada"})

        assert response.json()["email"] == "a@x.com"

