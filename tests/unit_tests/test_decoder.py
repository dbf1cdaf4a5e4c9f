import unittest

from osuapi.decoder import decode_list, decode_match, decode_one, decode_user
from osuapi.errors import DecodeError, InvalidEnumCodeError
from osuapi.models import (Approval, Beatmap, GameScore, Genre, Language, Match, Mods, Performance, PlayMode,
                           RecentPlay, ScoringType, TeamType, User, UserEvent)
from tests.unit_tests.samples import BEATMAP, GAME_SCORE, MATCH, PERFORMANCE, RECENT_PLAY, USER, body


class TestDecodeBeatmap(unittest.TestCase):

    def test_decode_list_returns_beatmaps_with_coerced_fields(self):
        beatmaps = decode_list(body([BEATMAP]), Beatmap)

        self.assertEqual(len(beatmaps), 1)
        beatmap = beatmaps[0]
        self.assertEqual(beatmap.beatmap_id, 3311346)
        self.assertEqual(beatmap.beatmapset_id, 1621894)
        self.assertEqual(beatmap.approved, Approval.RANKED)
        self.assertEqual(beatmap.genre_id, Genre.JAZZ)
        self.assertEqual(beatmap.language_id, Language.INSTRUMENTAL)
        self.assertEqual(beatmap.mode, PlayMode.STANDARD)
        self.assertEqual(beatmap.bpm, 148.0)
        self.assertEqual(beatmap.diff_size, 4.5)
        self.assertEqual(beatmap.difficulty_rating, 7.65575)
        self.assertEqual(beatmap.play_count, 224)
        self.assertEqual(beatmap.pass_count, 47)
        self.assertEqual(beatmap.max_combo, 887)
        self.assertEqual(beatmap.approved_date, '2022-01-10 00:47:06')
        self.assertEqual(beatmap.tag_list, ['fanzhen0019', 'macuilxochitl'])

    def test_decode_accepts_json_numbers(self):
        payload = BEATMAP | {'beatmap_id': 3311346, 'bpm': 148.5, 'approved': 4, 'max_combo': 887}
        beatmap = decode_one(body(payload), Beatmap)

        self.assertEqual(beatmap.beatmap_id, 3311346)
        self.assertEqual(beatmap.bpm, 148.5)
        self.assertEqual(beatmap.approved, Approval.LOVED)

    def test_null_optional_fields_decode_to_none(self):
        payload = BEATMAP | {'approved_date': None, 'max_combo': None}
        beatmap = decode_one(body(payload), Beatmap)

        self.assertIsNone(beatmap.approved_date)
        self.assertIsNone(beatmap.max_combo)

    def test_absent_optional_fields_decode_to_none(self):
        payload = {k: v for k, v in BEATMAP.items() if k not in ('approved_date', 'max_combo')}
        beatmap = decode_one(body(payload), Beatmap)

        self.assertIsNone(beatmap.approved_date)
        self.assertIsNone(beatmap.max_combo)

    def test_numeric_string_zero_decodes_to_zero(self):
        beatmap = decode_one(body(BEATMAP | {'favourite_count': '0'}), Beatmap)

        self.assertEqual(beatmap.favourite_count, 0)

    def test_integer_fields_reject_bools_and_floats(self):
        for field, bad_value in (('beatmap_id', True), ('favourite_count', 47.0), ('favourite_count', '47.0')):
            with self.subTest(field=field, value=bad_value):
                with self.assertRaises(DecodeError) as ctx:
                    decode_one(body(BEATMAP | {field: bad_value}), Beatmap)
                self.assertEqual(ctx.exception.field, field)
                self.assertEqual(ctx.exception.value, bad_value)

    def test_negative_integer_string_decodes(self):
        beatmap = decode_one(body(BEATMAP | {'favourite_count': '-1'}), Beatmap)

        self.assertEqual(beatmap.favourite_count, -1)

    def test_non_numeric_string_fails_naming_the_field(self):
        with self.assertRaises(DecodeError) as ctx:
            decode_one(body(BEATMAP | {'favourite_count': 'abc'}), Beatmap)

        self.assertEqual(ctx.exception.field, 'favourite_count')
        self.assertEqual(ctx.exception.value, 'abc')
        self.assertEqual(ctx.exception.kind, 'decode')

    def test_unknown_enum_code_fails_with_invalid_enum_code(self):
        with self.assertRaises(InvalidEnumCodeError) as ctx:
            decode_one(body(BEATMAP | {'genre_id': '99'}), Beatmap)

        self.assertEqual(ctx.exception.field, 'genre_id')
        self.assertEqual(ctx.exception.value, '99')

    def test_missing_required_field_fails(self):
        payload = {k: v for k, v in BEATMAP.items() if k != 'artist'}
        with self.assertRaises(DecodeError) as ctx:
            decode_one(body(payload), Beatmap)

        self.assertEqual(ctx.exception.field, 'artist')

    def test_one_bad_element_fails_the_whole_list(self):
        with self.assertRaises(DecodeError):
            decode_list(body([BEATMAP, BEATMAP | {'bpm': 'fast'}]), Beatmap)

    def test_decode_list_rejects_an_object(self):
        with self.assertRaises(DecodeError):
            decode_list(body(BEATMAP), Beatmap)

    def test_malformed_json_fails(self):
        with self.assertRaises(DecodeError) as ctx:
            decode_list(b'[{"beatmap_id": ', Beatmap)

        self.assertIsNone(ctx.exception.field)

    def test_empty_list_decodes_to_empty_list(self):
        self.assertEqual(decode_list(b'[]', Beatmap), [])


class TestDecodeScores(unittest.TestCase):

    def test_decode_game_score(self):
        score = decode_one(body(GAME_SCORE), GameScore)

        self.assertEqual(score.score_id, 3950183920)
        self.assertEqual(score.score, 63127872)
        self.assertEqual(score.count_300, 854)
        self.assertEqual(score.count_100, 8)
        self.assertEqual(score.count_geki, 165)
        self.assertEqual(score.count_katu, 7)
        self.assertEqual(score.max_combo, 1210)
        self.assertTrue(score.perfect)
        self.assertEqual(score.enabled_mods, Mods.HIDDEN | Mods.DOUBLE_TIME)
        self.assertEqual(score.pp, 712.844)
        self.assertTrue(score.replay_available)

    def test_game_score_pp_can_be_null(self):
        score = decode_one(body(GAME_SCORE | {'pp': None}), GameScore)

        self.assertIsNone(score.pp)

    def test_performance_perfect_one_is_true(self):
        performance = decode_one(body(PERFORMANCE | {'perfect': '1'}), Performance)

        self.assertIs(performance.perfect, True)

    def test_performance_perfect_zero_is_false(self):
        performance = decode_one(body(PERFORMANCE | {'perfect': '0'}), Performance)

        self.assertIs(performance.perfect, False)

    def test_performance_perfect_accepts_integers(self):
        performance = decode_one(body(PERFORMANCE | {'perfect': 1}), Performance)

        self.assertIs(performance.perfect, True)

    def test_performance_perfect_rejects_other_values(self):
        with self.assertRaises(DecodeError) as ctx:
            decode_one(body(PERFORMANCE | {'perfect': '2'}), Performance)

        self.assertEqual(ctx.exception.field, 'perfect')

    def test_non_finite_pp_fails(self):
        for bad_pp in ('nan', 'inf', '-inf'):
            with self.subTest(pp=bad_pp):
                with self.assertRaises(DecodeError) as ctx:
                    decode_one(body(PERFORMANCE | {'pp': bad_pp}), Performance)
                self.assertEqual(ctx.exception.field, 'pp')

    def test_performance_requires_pp(self):
        payload = {k: v for k, v in PERFORMANCE.items() if k != 'pp'}
        with self.assertRaises(DecodeError):
            decode_one(body(payload), Performance)

    def test_decode_recent_play(self):
        play = decode_list(body([RECENT_PLAY]), RecentPlay)[0]

        self.assertEqual(play.beatmap_id, 774965)
        self.assertFalse(play.perfect)
        self.assertEqual(play.enabled_mods, Mods.NONE)
        self.assertEqual(play.count_miss, 3)
        self.assertEqual(play.total_hits, 417)
        self.assertEqual(play.rank, 'F')

    def test_mods_of_unexpected_type_fail_to_decode(self):
        for bad_mods in (8.5, True, {'bits': 8}, 'HD'):
            with self.subTest(mods=bad_mods):
                with self.assertRaises(DecodeError) as ctx:
                    decode_one(body(RECENT_PLAY | {'enabled_mods': bad_mods}), RecentPlay)
                self.assertEqual(ctx.exception.field, 'enabled_mods')


class TestDecodeMatch(unittest.TestCase):

    def test_decode_match_with_games_and_scores(self):
        match = decode_match(body(MATCH))

        self.assertIsInstance(match, Match)
        self.assertEqual(match.match_id, 59434612)
        self.assertIsNone(match.end_time)
        self.assertEqual(len(match.games), 1)

        game = match.games[0]
        self.assertEqual(game.game_id, 311346452)
        self.assertEqual(game.play_mode, PlayMode.STANDARD)
        self.assertEqual(game.scoring_type, ScoringType.SCORE_V2)
        self.assertEqual(game.team_type, TeamType.TEAM_VS)
        self.assertEqual(game.mods, Mods.NO_FAIL)

        score = game.scores[0]
        self.assertEqual(score.slot, 0)
        self.assertEqual(score.team, 1)
        self.assertEqual(score.score, 912343)
        self.assertTrue(score.perfect)
        self.assertTrue(score.pass_)

    def test_missing_match_decodes_to_none(self):
        self.assertIsNone(decode_match(b'{"match": 0, "games": []}'))

    def test_bad_team_type_fails(self):
        payload = {'match': MATCH['match'], 'games': [MATCH['games'][0] | {'team_type': '7'}]}
        with self.assertRaises(InvalidEnumCodeError) as ctx:
            decode_match(body(payload))

        self.assertEqual(ctx.exception.field, 'games.0.team_type')
        self.assertEqual(ctx.exception.value, '7')

    def test_body_without_match_key_fails(self):
        with self.assertRaises(DecodeError):
            decode_match(b'[]')


class TestDecodeUser(unittest.TestCase):

    def test_decode_user_takes_first_element(self):
        user = decode_user(body([USER]))

        self.assertIsInstance(user, User)
        self.assertEqual(user.id, 5642779)
        self.assertEqual(user.username, 'heyronii')
        self.assertEqual(user.level, 102.93)
        self.assertEqual(user.pp_raw, 11881.3)
        self.assertEqual(user.ranked_score, 49687237487)
        self.assertEqual(user.count_rank_ssh, 21)
        self.assertEqual(len(user.events), 1)
        self.assertEqual(user.events[0].epic_factor, 1)
        self.assertEqual(user.events[0].beatmap_id, 3311346)

    def test_decode_user_accepts_a_bare_object(self):
        self.assertEqual(decode_user(body(USER)), decode_user(body([USER])))

    def test_user_not_found_decodes_to_none(self):
        self.assertIsNone(decode_user(b'[]'))

    def test_inactive_user_statistics_are_none(self):
        payload = USER | {'pp_rank': None, 'pp_raw': None, 'level': None, 'accuracy': None, 'events': []}
        user = decode_user(body([payload]))

        self.assertIsNone(user.pp_rank)
        self.assertIsNone(user.pp_raw)
        self.assertEqual(user.events, [])

    def test_bad_event_field_fails_the_user(self):
        payload = USER | {'events': [USER['events'][0] | {'epicfactor': 'x'}]}
        with self.assertRaises(DecodeError) as ctx:
            decode_user(body([payload]))

        self.assertEqual(ctx.exception.field, 'events.0.epicfactor')


class TestDecodeIsRepeatable(unittest.TestCase):

    def test_decode_twice_yields_equal_records(self):
        cases = (
            ('beatmaps', lambda: decode_list(body([BEATMAP]), Beatmap)),
            ('game scores', lambda: decode_list(body([GAME_SCORE]), GameScore)),
            ('performances', lambda: decode_list(body([PERFORMANCE]), Performance)),
            ('recent plays', lambda: decode_list(body([RECENT_PLAY]), RecentPlay)),
            ('match', lambda: decode_match(body(MATCH))),
            ('user', lambda: decode_user(body([USER]))),
            ('user event', lambda: decode_one(body(USER['events'][0]), UserEvent)),
        )
        for name, decode in cases:
            with self.subTest(record=name):
                first = decode()
                second = decode()
                self.assertIsNotNone(first)
                self.assertEqual(first, second)

    def test_nested_match_records_are_equal(self):
        first = decode_match(body(MATCH))
        second = decode_match(body(MATCH))

        self.assertEqual(first.games[0], second.games[0])
        self.assertEqual(first.games[0].scores[0], second.games[0].scores[0])


if __name__ == '__main__':
    unittest.main()
