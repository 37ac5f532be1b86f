from briefcase_kv.cli import main

main()
