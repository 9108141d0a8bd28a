from s3tasks.s3tasks_cli import main

if __name__ == "__main__":
    main()
