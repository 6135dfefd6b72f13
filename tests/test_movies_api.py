"""Movies CRUD over HTTP, including the joined director name."""

import unittest

from sqlalchemy import text

from tests.support import ApiTestCase


class TestMovies(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user = self.auth_headers("alice")
        self.admin = self.auth_headers("root", admin=True)
        self.director = self.create_director(self.user)

    def _create(self, title: str = "Dune", year: int = 2021, director_id: int | None = None):
        return self.client.post(
            "/movies",
            json={
                "title": title,
                "director_id": self.director["id"] if director_id is None else director_id,
                "year": year,
            },
            headers=self.user,
        )

    def test_create_then_get_includes_director_name(self) -> None:
        created = self._create()
        self.assertEqual(created.status_code, 201)
        movie = created.json()
        self.assertEqual(movie["title"], "Dune")
        self.assertEqual(movie["year"], 2021)
        self.assertEqual(movie["director_id"], self.director["id"])

        fetched = self.client.get(f"/movies/{movie['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(
            fetched.json(),
            {
                "id": movie["id"],
                "title": "Dune",
                "year": 2021,
                "director_id": self.director["id"],
                "director_name": "Denis Villeneuve",
            },
        )

    def test_create_missing_fields(self) -> None:
        resp = self.client.post("/movies", json={"title": "Dune"}, headers=self.user)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["fields"], ["director_id", "year"])

    def test_create_with_unknown_director(self) -> None:
        resp = self._create(director_id=999)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("999", resp.json()["error"])

    def test_get_unknown_movie(self) -> None:
        resp = self.client.get("/movies/12345")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Movie not found"})

    def test_non_integer_id_is_bad_request(self) -> None:
        self.assertEqual(self.client.get("/movies/abc").status_code, 400)

    def test_out_of_range_integers_are_bad_request(self) -> None:
        self.assertEqual(self.client.get("/movies/100000000000000000000").status_code, 400)
        self.assertEqual(self.client.get("/movies/0").status_code, 400)
        self.assertEqual(self.client.delete(f"/movies/{2**31}", headers=self.admin).status_code, 400)

        resp = self._create(year=10**20)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["fields"], ["year"])

        resp = self._create(director_id=2**31)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["fields"], ["director_id"])

    def test_list_is_ordered_by_id(self) -> None:
        with self.engine.begin() as conn:
            for movie_id in (5, 2, 9):
                conn.execute(
                    text(
                        "INSERT INTO movies (id, title, director_id, year) "
                        "VALUES (:id, :title, NULL, 2000)"
                    ),
                    {"id": movie_id, "title": f"Movie {movie_id}"},
                )
        resp = self.client.get("/movies")
        self.assertEqual(resp.status_code, 200)
        rows = resp.json()
        self.assertEqual([m["id"] for m in rows], [2, 5, 9])
        self.assertTrue(all(m["director_name"] is None for m in rows))

    def test_update_requires_admin_and_replaces_fields(self) -> None:
        movie_id = self._create().json()["id"]
        body = {"title": "Dune: Part Two", "director_id": self.director["id"], "year": 2024}

        self.assertEqual(
            self.client.put(f"/movies/{movie_id}", json=body, headers=self.user).status_code, 403
        )
        resp = self.client.put(f"/movies/{movie_id}", json=body, headers=self.admin)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["title"], "Dune: Part Two")
        self.assertEqual(resp.json()["year"], 2024)
        self.assertEqual(resp.json()["director_name"], "Denis Villeneuve")

    def test_update_can_clear_director(self) -> None:
        movie_id = self._create().json()["id"]
        resp = self.client.put(
            f"/movies/{movie_id}", json={"title": "Dune", "year": 2021}, headers=self.admin
        )
        self.assertEqual(resp.status_code, 200)
        self.assertIsNone(resp.json()["director_id"])
        self.assertIsNone(resp.json()["director_name"])

    def test_update_unknown_movie(self) -> None:
        resp = self.client.put(
            "/movies/999", json={"title": "X", "year": 2000}, headers=self.admin
        )
        self.assertEqual(resp.status_code, 404)

    def test_delete(self) -> None:
        movie_id = self._create().json()["id"]
        self.assertEqual(self.client.delete("/movies/999", headers=self.admin).status_code, 404)

        resp = self.client.delete(f"/movies/{movie_id}", headers=self.admin)
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(resp.content, b"")
        self.assertEqual(self.client.get(f"/movies/{movie_id}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
