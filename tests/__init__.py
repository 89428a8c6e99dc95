"""Tests for matchcopy.

Test Files and Coverage:
========================

| Test File           | Test Classes                         | Tested Constructs                    | Tested Functionalities                     |
|---------------------|--------------------------------------|--------------------------------------|--------------------------------------------|
| test_listing.py     | ListFilesTest                        | list_files()                         | Direct children only, errors, skips        |
| test_matcher.py     | ReduceToStemTest, MatcherTest        | reduce_to_stem(), compute_matching() | Stem rules, matching/missing partition     |
|                     |                                      | compute_missing()                    |                                            |
| test_copier.py      | CopyMatchingTest                     | copy_matching()                      | Destination setup, per-file failure        |
| test_reconciler.py  | ReconcilerTest                       | Reconciler                           | Copy and report workflows                  |
| test_settings.py    | SettingsTest, LocateSettingsFileTest | Settings, locate_settings_file()     | TOML loading, dot keys, lookup order       |
| test_cli.py         | CliTest                              | matchcopy_main()                     | Options, exit status, logging setup        |
"""
