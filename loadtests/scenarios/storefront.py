"""Storefront load test scenario.

A visitor browses the listing, switches language, and browses again. The
second listing must come back rendered with the chosen locality.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.helpers.state import VisitorState

LOCALITIES = ["en-US", "es-ES", "fr-FR", "de-DE", "fr", "it-IT"]


class BrowseAndSwitchLanguage(SequentialTaskSet):
    """Browse -> Switch language -> Browse."""

    def on_start(self):
        self.state = VisitorState()

    @task
    def browse(self):
        with self.client.get("/", catch_response=True, name="GET /") as resp:
            if resp.status_code != 200:
                resp.failure(f"Listing failed: {resp.status_code}")

    @task
    def switch_language(self):
        locality = random.choice(LOCALITIES)
        with self.client.get(
            f"/setlanguage/{locality}",
            allow_redirects=False,
            catch_response=True,
            name="GET /setlanguage/[lang]",
        ) as resp:
            if resp.status_code == 302:
                self.state.locality = locality
                self.state.switches += 1
            else:
                resp.failure(f"Language switch failed: {resp.status_code}")
                self.interrupt()

    @task
    def browse_localized(self):
        with self.client.get("/", catch_response=True, name="GET / (localized)") as resp:
            if resp.status_code != 200:
                resp.failure(f"Listing failed: {resp.status_code}")
            elif f'data-locality="{self.state.locality}"' not in resp.text:
                resp.failure(f"Listing not rendered for {self.state.locality}")


class StorefrontVisitor(HttpUser):
    tasks = [BrowseAndSwitchLanguage]
    wait_time = between(0.5, 2)
